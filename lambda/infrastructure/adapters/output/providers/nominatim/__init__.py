"""Nominatim Geocoder Package"""

from infrastructure.adapters.output.providers.nominatim.nominatim_geocoder import (
    NominatimGeocoder,
    get_nominatim_geocoder
)

__all__ = ['NominatimGeocoder', 'get_nominatim_geocoder']
