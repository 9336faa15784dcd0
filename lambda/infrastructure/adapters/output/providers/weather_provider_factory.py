"""
Weather Provider Factory - criação centralizada dos providers Open-Meteo
(forecast + geocoding) compartilhando o mesmo gerenciador de sessão HTTP
"""
from typing import Optional

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoGeocodingProvider,
    OpenMeteoProvider
)


class WeatherProviderFactory:
    """
    Factory simples para gerenciar os providers.
    Mantém lazy-loading e singleton para reuso em execução quente da Lambda.
    """

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None):
        self.session_manager = session_manager
        self._weather_provider: Optional[IWeatherProvider] = None
        self._geocoding_provider: Optional[IGeocodingProvider] = None

    def _get_session_manager(self) -> AiohttpSessionManager:
        if self.session_manager is None:
            self.session_manager = get_aiohttp_session_manager()
        return self.session_manager

    def get_weather_provider(self) -> IWeatherProvider:
        """Retorna provider padrão (Open-Meteo Forecast)."""
        if self._weather_provider is None:
            self._weather_provider = OpenMeteoProvider(session_manager=self._get_session_manager())
        return self._weather_provider

    def get_geocoding_provider(self) -> IGeocodingProvider:
        """Retorna provider de geocoding (Open-Meteo Geocoding)."""
        if self._geocoding_provider is None:
            self._geocoding_provider = OpenMeteoGeocodingProvider(
                session_manager=self._get_session_manager()
            )
        return self._geocoding_provider


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory() -> WeatherProviderFactory:
    """
    Retorna singleton da factory (somente Open-Meteo).
    """
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory()

    return _factory_instance
