"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas dos adapters de entrada e saída
"""

from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers import (
    NominatimGeocoder,
    OpenMeteoProvider,
)

__all__ = [
    'get_aiohttp_session_manager',
    'NominatimGeocoder',
    'OpenMeteoProvider',
]
