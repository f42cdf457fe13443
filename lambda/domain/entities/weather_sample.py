"""
Weather Sample Entity - Uma hora de condições meteorológicas (entrada do scorer)
"""
import math
from dataclasses import dataclass
from typing import Optional

from domain.constants import App


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


_CORE_FIELDS = ('temperature', 'humidity', 'dew_point', 'wind_speed', 'cloud_cover')
_ADVANCED_FIELDS = (
    'vapour_pressure_deficit',
    'wet_bulb_temperature',
    'shortwave_radiation',
    'sunshine_duration',
    'evapotranspiration',
)


@dataclass(frozen=True)
class WeatherSample:
    """
    Entidade de amostra horária para o cálculo de secagem

    Campos obrigatórios são as cinco variáveis básicas. As métricas avançadas
    são opcionais: None significa "não disponível" e o scorer usa apenas a
    curva base do componente correspondente. Nenhum valor fora da faixa gera
    erro - umidade e nebulosidade são limitadas a [0, 100] na criação.
    NaN vira 0 nos campos básicos e None (ausente) nas métricas avançadas.
    """
    temperature: float  # Temperatura em °C
    humidity: float  # Umidade relativa % (0-100)
    dew_point: float  # Ponto de orvalho em °C
    wind_speed: float  # Velocidade do vento em km/h
    cloud_cover: float  # Cobertura de nuvens % (0-100)
    hour: int = 0  # Índice da hora no dia (0-23)
    time: str = ""  # Rótulo da hora (ex: "14:00")
    precipitation: float = 0.0  # Precipitação em mm
    precipitation_probability: float = 0.0  # Probabilidade de precipitação % (0-100)
    vapour_pressure_deficit: Optional[float] = None  # VPD em kPa
    wet_bulb_temperature: Optional[float] = None  # Bulbo úmido em °C
    shortwave_radiation: Optional[float] = None  # Radiação de onda curta W/m²
    sunshine_duration: Optional[float] = None  # Horas de sol dentro da hora (0-1)
    evapotranspiration: Optional[float] = None  # ET0 em mm/dia

    def __post_init__(self):
        """Normaliza faixas na borda - o scorer nunca revalida"""
        for name in _CORE_FIELDS + ('precipitation', 'precipitation_probability'):
            if math.isnan(float(getattr(self, name))):
                object.__setattr__(self, name, 0.0)
        for name in _ADVANCED_FIELDS:
            value = getattr(self, name)
            if value is not None and math.isnan(float(value)):
                object.__setattr__(self, name, None)
        object.__setattr__(self, 'humidity', _clamp(float(self.humidity), 0.0, 100.0))
        object.__setattr__(self, 'cloud_cover', _clamp(float(self.cloud_cover), 0.0, 100.0))
        object.__setattr__(
            self,
            'precipitation_probability',
            _clamp(float(self.precipitation_probability), 0.0, 100.0)
        )
        object.__setattr__(self, 'precipitation', max(0.0, float(self.precipitation)))
        object.__setattr__(self, 'hour', int(_clamp(int(self.hour), 0, App.HOURS_PER_DAY - 1)))
        if not self.time:
            object.__setattr__(self, 'time', f"{self.hour:02d}:00")

    @property
    def dew_point_spread(self) -> float:
        """Diferença entre temperatura do ar e ponto de orvalho (°C)"""
        return self.temperature - self.dew_point

    @property
    def has_advanced_metrics(self) -> bool:
        return any(getattr(self, name) is not None for name in _ADVANCED_FIELDS)

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API

        Returns:
            Dict com dados formatados para JSON
        """
        response = {
            'hour': self.hour,
            'time': self.time,
            'temperature': round(self.temperature, 1),
            'humidity': round(self.humidity, 1),
            'dewPoint': round(self.dew_point, 1),
            'windSpeed': round(self.wind_speed, 1),
            'cloudCover': round(self.cloud_cover, 1),
            'precipitation': round(self.precipitation, 1),
            'precipitationProbability': round(self.precipitation_probability, 1),
        }

        # Adicionar campos opcionais se disponíveis
        if self.vapour_pressure_deficit is not None:
            response['vapourPressureDeficit'] = round(self.vapour_pressure_deficit, 2)
        if self.wet_bulb_temperature is not None:
            response['wetBulbTemperature'] = round(self.wet_bulb_temperature, 1)
        if self.shortwave_radiation is not None:
            response['shortwaveRadiation'] = round(self.shortwave_radiation, 0)
        if self.sunshine_duration is not None:
            response['sunshineDuration'] = round(self.sunshine_duration, 2)
        if self.evapotranspiration is not None:
            response['evapotranspiration'] = round(self.evapotranspiration, 2)

        return response
