"""
Output Port: Geocoding Provider
Contrato para provedores que traduzem nome de lugar em coordenadas
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.location import ResolvedLocation


class IGeocodingProvider(ABC):
    """Interface para provedores de geocoding"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: OpenMeteoGeocoding)"""
        raise NotImplementedError

    @abstractmethod
    async def search(self, name: str) -> Optional[ResolvedLocation]:
        """
        Busca o primeiro resultado para um nome de lugar

        Args:
            name: Nome em texto livre (ex.: "são paulo")

        Returns:
            ResolvedLocation do primeiro resultado, ou None sem resultados

        Raises:
            UpstreamUnavailableError: Falha de rede/timeout/status não-2xx
        """
        raise NotImplementedError
