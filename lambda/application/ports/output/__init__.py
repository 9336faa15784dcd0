"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .geocoding_provider_port import IGeocodingProvider
from .weather_provider_port import IWeatherProvider

__all__ = ['IGeocodingProvider', 'IWeatherProvider']
