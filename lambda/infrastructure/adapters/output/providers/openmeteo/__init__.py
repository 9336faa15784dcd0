"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_provider import (
    OpenMeteoProvider,
    get_openmeteo_provider
)
from infrastructure.adapters.output.providers.openmeteo.geocoding_provider import (
    OpenMeteoGeocodingProvider,
    get_geocoding_provider
)

__all__ = [
    'OpenMeteoProvider',
    'get_openmeteo_provider',
    'OpenMeteoGeocodingProvider',
    'get_geocoding_provider'
]
