"""
Open-Meteo Geocoding Provider
Traduz nome de cidade em coordenadas (primeiro resultado)
"""
import asyncio
from typing import Any, Dict, Optional

import aiohttp
from ddtrace import tracer

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.constants import API
from domain.entities.location import ResolvedLocation
from domain.exceptions import InvalidCoordinateError, NoDataError, UpstreamUnavailableError
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoGeocodingProvider(IGeocodingProvider):
    """Provider para a Geocoding API do Open-Meteo"""

    def __init__(
        self,
        session_manager: Optional[AiohttpSessionManager] = None,
        base_url: str = API.GEOCODING_BASE_URL,
        language: str = settings.GEOCODING_LANGUAGE
    ):
        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager or get_aiohttp_session_manager()
        self.language = language

    @property
    def provider_name(self) -> str:
        return "OpenMeteoGeocoding"

    async def _fetch_search(self, name: str) -> Dict[str, Any]:
        """Busca direto na API (sem cache)"""
        url = f"{self.base_url}{API.GEOCODING_SEARCH_PATH}"
        params = {
            "name": name,
            "count": 1,
            "language": self.language,
            "format": "json"
        }

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=params) as response:
                status = response.status

                if status < 200 or status >= 300:
                    reason = await response.text()
                    logger.error(
                        "Geocoding returned non-2xx",
                        status=status,
                        reason=reason[:200],
                        name=name
                    )
                    raise UpstreamUnavailableError(
                        f"Geocoding service returned HTTP {status}",
                        details={"name": name, "status": status}
                    )
                payload = await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.error("Geocoding request failed", error=str(ex), name=name)
            raise UpstreamUnavailableError(
                f"Geocoding request failed: {str(ex) or type(ex).__name__}",
                details={"name": name}
            ) from ex
        except ValueError as ex:
            raise UpstreamUnavailableError(
                "Geocoding service returned an invalid body",
                details={"name": name}
            ) from ex

        return payload if isinstance(payload, dict) else {}

    @tracer.wrap(resource="geocoding.search")
    async def search(self, name: str) -> Optional[ResolvedLocation]:
        """
        Busca a cidade e devolve o primeiro resultado

        Returns:
            ResolvedLocation ou None quando não há resultados
        """
        payload = await self._fetch_search(name)

        results = payload.get("results") or []
        if not isinstance(results, list):
            raise NoDataError(
                "Malformed geocoding response: results is not a list",
                details={"name": name, "type": type(results).__name__}
            )
        if not results:
            logger.debug("Geocoding sem resultados", name=name)
            return None

        first = results[0]
        if not isinstance(first, dict):
            raise NoDataError(
                "Malformed geocoding response: result is not an object",
                details={"name": name, "type": type(first).__name__}
            )
        try:
            coordinates = Coordinates(
                latitude=float(first["latitude"]),
                longitude=float(first["longitude"])
            )
        except (KeyError, TypeError, ValueError, InvalidCoordinateError) as ex:
            raise NoDataError(
                "Geocoding result has no valid coordinates",
                details={"name": name}
            ) from ex

        return ResolvedLocation(
            coordinates=coordinates,
            display_name=first.get("name") or name,
            country=first.get("country"),
            admin1=first.get("admin1"),
            timezone=first.get("timezone")
        )


_geocoding_provider_instance: Optional[OpenMeteoGeocodingProvider] = None


def get_geocoding_provider() -> OpenMeteoGeocodingProvider:
    """Retorna singleton do provider de geocoding"""
    global _geocoding_provider_instance
    if _geocoding_provider_instance is None:
        _geocoding_provider_instance = OpenMeteoGeocodingProvider()
    return _geocoding_provider_instance
