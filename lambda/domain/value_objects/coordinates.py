"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Tuple

from domain.constants import Geo
from domain.exceptions import InvalidCoordinatesException


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Type-safe (não são floats soltos)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (Geo.MIN_LATITUDE <= self.latitude <= Geo.MAX_LATITUDE):
            raise InvalidCoordinatesException(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre {Geo.MIN_LATITUDE} e {Geo.MAX_LATITUDE} graus.",
                details={"latitude": self.latitude}
            )
        if not (Geo.MIN_LONGITUDE <= self.longitude <= Geo.MAX_LONGITUDE):
            raise InvalidCoordinatesException(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre {Geo.MIN_LONGITUDE} e {Geo.MAX_LONGITUDE} graus.",
                details={"longitude": self.longitude}
            )

    def to_tuple(self) -> Tuple[float, float]:
        """
        Retorna coordenadas como tupla (lat, lon)

        Returns:
            Tupla (latitude, longitude)
        """
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        """String representation amigável"""
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float]) -> 'Coordinates':
        """
        Factory method para criar a partir de tupla

        Args:
            coords: Tupla (latitude, longitude)

        Returns:
            Instância de Coordinates
        """
        return cls(latitude=coords[0], longitude=coords[1])
