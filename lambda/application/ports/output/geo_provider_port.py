"""
Output Port: Reverse Geocoder
Contrato para provedores que traduzem coordenadas em nome de lugar
"""
from abc import ABC, abstractmethod

from domain.value_objects.coordinates import Coordinates


class IReverseGeocoder(ABC):
    """Interface para geocodificação reversa"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: Nominatim)"""
        raise NotImplementedError

    @abstractmethod
    async def get_place_name(self, coordinates: Coordinates) -> str:
        """
        Busca nome do lugar para as coordenadas
        
        Args:
            coordinates: Localização
        
        Returns:
            Nome do lugar
        
        Raises:
            Qualquer exceção do provider - o use case aplica o fallback
        """
        raise NotImplementedError
