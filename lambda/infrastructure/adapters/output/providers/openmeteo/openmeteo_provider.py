"""Open-Meteo Provider - Implementação do provider para Open-Meteo API"""

import asyncio
from datetime import date
from typing import List, Optional, Tuple

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, App
from domain.entities.weather_sample import WeatherSample
from domain.exceptions import WeatherProviderException
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.daylight_window import DaylightWindow
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers.openmeteo.mappers.openmeteo_data_mapper import OpenMeteoDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoProvider(IWeatherProvider):
    """
    Provider para Open-Meteo Forecast API

    Características:
    - API gratuita, sem chave
    - Uma chamada por dia pedido (hourly + sunrise/sunset)
    - Horas no fuso local da aplicação (App.TIMEZONE)
    - 100% async com aiohttp
    """

    def __init__(self, base_url: str = API.OPENMETEO_BASE_URL, timezone: str = App.TIMEZONE):
        self.base_url = base_url.rstrip("/")
        self.timezone = timezone
        self.session_manager = get_aiohttp_session_manager()

    @property
    def provider_name(self) -> str:
        return "OpenMeteo"

    def _build_params(self, coordinates: Coordinates, target_date: date) -> dict:
        day = target_date.isoformat()
        return {
            'latitude': coordinates.latitude,
            'longitude': coordinates.longitude,
            'hourly': ','.join(API.OPENMETEO_HOURLY_FIELDS),
            'daily': ','.join(API.OPENMETEO_DAILY_FIELDS),
            'timezone': self.timezone,
            'start_date': day,
            'end_date': day,
        }

    @tracer.wrap(resource="openmeteo.get_day_forecast")
    async def get_day_forecast(
        self,
        coordinates: Coordinates,
        target_date: date
    ) -> Tuple[List[WeatherSample], Optional[DaylightWindow]]:
        """
        Busca previsão horária de um dia na API Open-Meteo

        Args:
            coordinates: Localização
            target_date: Dia desejado

        Returns:
            Tupla (amostras horárias, janela de luz do dia)

        Raises:
            WeatherProviderException: Erro HTTP, timeout ou resposta inválida
        """
        url = f"{self.base_url}/forecast"
        params = self._build_params(coordinates, target_date)
        details = {
            'latitude': coordinates.latitude,
            'longitude': coordinates.longitude,
            'date': target_date.isoformat(),
        }

        logger.info("Open-Meteo request", **details)

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(
                        "Open-Meteo API error",
                        status=response.status,
                        error=error_text[:200]
                    )
                    raise WeatherProviderException(
                        f"Open-Meteo API returned status {response.status}",
                        details={**details, 'status': response.status}
                    )
                data = await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.error("Open-Meteo request failed", error=str(ex), error_type=type(ex).__name__)
            raise WeatherProviderException(
                f"Open-Meteo request failed: {str(ex)}",
                details=details
            ) from ex
        except ValueError as ex:
            # JSON inválido (json.JSONDecodeError)
            logger.error("Open-Meteo returned invalid JSON", error=str(ex))
            raise WeatherProviderException(
                "Open-Meteo returned an invalid response body",
                details=details
            ) from ex

        if not isinstance(data, dict) or 'hourly' not in data:
            raise WeatherProviderException(
                "Open-Meteo response missing hourly data",
                details=details
            )

        try:
            samples = OpenMeteoDataMapper.map_hourly_response_to_samples(data)
            daylight = OpenMeteoDataMapper.map_daylight(data)
        except (TypeError, ValueError, AttributeError) as ex:
            logger.error("Open-Meteo response mapping failed", error=str(ex), error_type=type(ex).__name__)
            raise WeatherProviderException(
                f"Open-Meteo response could not be mapped: {str(ex)}",
                details=details
            ) from ex

        logger.info(
            "Open-Meteo forecast mapped",
            samples=len(samples),
            advanced_hours=sum(1 for sample in samples if sample.has_advanced_metrics),
            has_daylight=daylight is not None
        )

        return samples, daylight


# Singleton factory (reutilizado entre invocações Lambda)
_openmeteo_provider_instance: Optional[OpenMeteoProvider] = None


def get_openmeteo_provider() -> OpenMeteoProvider:
    """Retorna instância singleton do provider Open-Meteo"""
    global _openmeteo_provider_instance

    if _openmeteo_provider_instance is None:
        _openmeteo_provider_instance = OpenMeteoProvider()

    return _openmeteo_provider_instance
