"""
Nominatim Geocoder
Geocodificação reversa (coordenadas -> nome do lugar) via OpenStreetMap
"""
import asyncio
from typing import Any, Dict, Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.geo_provider_port import IReverseGeocoder
from domain.constants import API, Display
from domain.exceptions import WeatherProviderException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from shared.config.logger_config import logger
from shared.config.settings import NOMINATIM_USER_AGENT

# Campos de address em ordem de preferência
ADDRESS_FIELDS = ('city', 'town', 'village', 'county')


class NominatimGeocoder(IReverseGeocoder):
    """Provider de nome de lugar usando Nominatim /reverse"""

    def __init__(self, base_url: str = API.NOMINATIM_BASE_URL, user_agent: str = NOMINATIM_USER_AGENT):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.session_manager = get_aiohttp_session_manager()

    @property
    def provider_name(self) -> str:
        return "Nominatim"

    @staticmethod
    def extract_place_name(payload: Dict[str, Any]) -> str:
        """
        Escolhe o nome mais útil da resposta

        Ordem: city, town, village, county, display_name, Display.UNKNOWN_LOCATION
        """
        address = payload.get('address') or {}
        for field in ADDRESS_FIELDS:
            if address.get(field):
                return address[field]
        return payload.get('display_name') or Display.UNKNOWN_LOCATION

    @tracer.wrap(resource="nominatim.get_place_name")
    async def get_place_name(self, coordinates: Coordinates) -> str:
        url = f"{self.base_url}/reverse"
        params = {
            'format': 'json',
            'lat': coordinates.latitude,
            'lon': coordinates.longitude,
        }

        try:
            session = await self.session_manager.get_session()
            async with session.get(
                url,
                params=params,
                headers={'User-Agent': self.user_agent}
            ) as response:
                if response.status != 200:
                    raise WeatherProviderException(
                        "Nominatim reverse geocoding failed",
                        details={'status': response.status, 'coordinates': str(coordinates)}
                    )
                payload = await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise WeatherProviderException(
                f"Nominatim request failed: {str(ex)}",
                details={'coordinates': str(coordinates)}
            ) from ex

        if not isinstance(payload, dict):
            raise WeatherProviderException(
                "Nominatim returned unexpected payload",
                details={'coordinates': str(coordinates)}
            )

        place_name = self.extract_place_name(payload)
        logger.debug("Nominatim place resolved", place=place_name)
        return place_name


# Singleton factory (reutilizado entre invocações Lambda)
_geocoder_instance: Optional[NominatimGeocoder] = None


def get_nominatim_geocoder() -> NominatimGeocoder:
    """Retorna instância singleton do geocoder Nominatim"""
    global _geocoder_instance

    if _geocoder_instance is None:
        _geocoder_instance = NominatimGeocoder()

    return _geocoder_instance
