"""Infrastructure Providers - Implementações de provedores externos"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_provider import (
    OpenMeteoProvider,
    get_openmeteo_provider
)
from infrastructure.adapters.output.providers.nominatim.nominatim_geocoder import (
    NominatimGeocoder,
    get_nominatim_geocoder
)

__all__ = ['OpenMeteoProvider', 'get_openmeteo_provider', 'NominatimGeocoder', 'get_nominatim_geocoder']
