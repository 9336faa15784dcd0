"""Infrastructure Providers - Implementações de provedores climáticos"""

from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoGeocodingProvider,
    OpenMeteoProvider
)
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory
)

__all__ = [
    'OpenMeteoProvider',
    'OpenMeteoGeocodingProvider',
    'WeatherProviderFactory',
    'get_weather_provider_factory'
]
