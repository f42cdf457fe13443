"""
Value Object: Janela de luz do dia (nascer/pôr do sol)
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DaylightWindow:
    """
    Nascer e pôr do sol em horas decimais locais (ex: 7.5 = 07:30)

    Uma hora é considerada diurna se sunrise <= hora <= sunset (ex: 7.5-8.0
    contém só a hora 8).
    """
    sunrise_decimal: float
    sunset_decimal: float

    def contains_hour(self, hour: int) -> bool:
        return self.sunrise_decimal <= hour <= self.sunset_decimal

    @property
    def sunrise(self) -> str:
        return self._format(self.sunrise_decimal)

    @property
    def sunset(self) -> str:
        return self._format(self.sunset_decimal)

    @staticmethod
    def _format(decimal_hour: float) -> str:
        total_minutes = int(round(decimal_hour * 60))
        return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"

    @classmethod
    def from_iso(cls, sunrise_iso: str, sunset_iso: str) -> 'DaylightWindow':
        """
        Factory a partir de timestamps ISO 8601 (ex: "2025-06-01T04:43")

        Raises:
            ValueError: Se algum timestamp for inválido
        """
        sunrise = datetime.fromisoformat(sunrise_iso)
        sunset = datetime.fromisoformat(sunset_iso)
        return cls(
            sunrise_decimal=sunrise.hour + sunrise.minute / 60,
            sunset_decimal=sunset.hour + sunset.minute / 60
        )

    def to_api_response(self) -> dict:
        return {'sunrise': self.sunrise, 'sunset': self.sunset}
