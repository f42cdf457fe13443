"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_provider_port import IWeatherProvider
from .geo_provider_port import IReverseGeocoder
from .summary_provider_port import ISummaryProvider

__all__ = ['IWeatherProvider', 'IReverseGeocoder', 'ISummaryProvider']
