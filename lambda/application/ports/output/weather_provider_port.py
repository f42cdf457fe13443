"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple

from domain.entities.weather_sample import WeatherSample
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.daylight_window import DaylightWindow


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    A aplicação usa Open-Meteo, mas mantemos a interface
    para facilitar troca futura de fonte.
    """

    @abstractmethod
    async def get_day_forecast(
        self,
        coordinates: Coordinates,
        target_date: date
    ) -> Tuple[List[WeatherSample], Optional[DaylightWindow]]:
        """
        Busca as amostras horárias de um dia
        
        Args:
            coordinates: Localização
            target_date: Dia desejado (timezone local da aplicação)
        
        Returns:
            Tupla (amostras em ordem de hora, janela de luz do dia ou None)
        
        Raises:
            WeatherProviderException: Se o provider falhar
        """
        pass
    
    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenMeteo')"""
        pass
