"""Open-Meteo Provider - Implementação do provider para Open-Meteo Forecast API"""

import asyncio
from typing import Any, Dict, Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Forecast
from domain.entities.weather_data import WeatherData
from domain.exceptions import UpstreamUnavailableError
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoProvider(IWeatherProvider):
    """
    Provider para Open-Meteo Forecast API

    Características:
    - API gratuita, sem chave
    - Condições atuais + série diária em UMA requisição
    - Sem cache e sem retry: falhas sobem imediatamente como
      UpstreamUnavailableError
    - 100% async com aiohttp
    """

    def __init__(
        self,
        session_manager: Optional[AiohttpSessionManager] = None,
        base_url: str = API.OPENMETEO_BASE_URL,
        forecast_days: int = Forecast.DAYS_REQUESTED,
        max_entries: int = Forecast.ENTRIES_RETURNED,
        temperature_unit: str = Forecast.TEMPERATURE_UNIT,
        wind_speed_unit: str = Forecast.WIND_SPEED_UNIT
    ):
        """
        Inicializa provider

        Args:
            session_manager: Gerenciador de sessão HTTP (usa singleton se None)
            base_url: URL base da API
            forecast_days: Dias pedidos ao provider (inclui hoje)
            max_entries: Dias devolvidos após descartar hoje
            temperature_unit: Unidade de temperatura pedida ao provider
            wind_speed_unit: Unidade de vento pedida ao provider
        """
        if forecast_days < 1 or forecast_days > 16:
            raise ValueError(f"forecast_days must be between 1 and 16, got {forecast_days}")

        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager or get_aiohttp_session_manager()
        self.forecast_days = forecast_days
        self.max_entries = max_entries
        self.temperature_unit = temperature_unit
        self.wind_speed_unit = wind_speed_unit

    @property
    def provider_name(self) -> str:
        return "OpenMeteo"

    def build_params(self, coordinates: Coordinates) -> Dict[str, Any]:
        """Query string do endpoint /forecast"""
        return {
            'latitude': coordinates.latitude,
            'longitude': coordinates.longitude,
            'current': ','.join(API.CURRENT_FIELDS),
            'daily': ','.join(API.DAILY_FIELDS),
            'temperature_unit': self.temperature_unit,
            'wind_speed_unit': self.wind_speed_unit,
            'timezone': 'auto',
            'forecast_days': self.forecast_days
        }

    @tracer.wrap(resource="openmeteo.fetch_weather")
    async def fetch_weather(self, coordinates: Coordinates) -> WeatherData:
        """
        Busca condições atuais + previsão diária do Open-Meteo

        Flow:
        1. Chama API Open-Meteo (async HTTP, uma requisição)
        2. Processa via OpenMeteoDataMapper e retorna WeatherData
        """
        url = f"{self.base_url}{API.OPENMETEO_FORECAST_PATH}"
        params = self.build_params(coordinates)

        logger.info(
            "Fetching Open-Meteo forecast",
            latitude=coordinates.latitude,
            longitude=coordinates.longitude
        )

        data = await self._get_json(url, params, coordinates)

        return OpenMeteoDataMapper.map_forecast_response(
            data,
            requested_coordinates=coordinates,
            temperature_unit=self.temperature_unit,
            wind_speed_unit=self.wind_speed_unit,
            max_entries=self.max_entries
        )

    async def _get_json(
        self,
        url: str,
        params: Dict[str, Any],
        coordinates: Coordinates
    ) -> Any:
        details = {"latitude": coordinates.latitude, "longitude": coordinates.longitude}

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=params) as response:
                status = response.status
                if status < 200 or status >= 300:
                    reason = await response.text()
                    logger.error(
                        "Open-Meteo returned non-2xx",
                        status=status,
                        reason=reason[:200],
                        **details
                    )
                    raise UpstreamUnavailableError(
                        f"Weather provider returned HTTP {status}",
                        details={**details, "status": status}
                    )
                return await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.error("Open-Meteo request failed", error=str(ex), **details)
            raise UpstreamUnavailableError(
                f"Weather provider request failed: {str(ex) or type(ex).__name__}",
                details=details
            ) from ex
        except ValueError as ex:
            # corpo não é JSON
            raise UpstreamUnavailableError(
                "Weather provider returned an invalid body",
                details=details
            ) from ex


# Factory singleton
_provider_instance = None


def get_openmeteo_provider() -> OpenMeteoProvider:
    """
    Factory para obter singleton do provider
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _provider_instance

    if _provider_instance is None:
        _provider_instance = OpenMeteoProvider()

    return _provider_instance
