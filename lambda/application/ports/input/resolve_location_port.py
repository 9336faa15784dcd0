"""
Input Port: Interface para resolver uma entrada de localização
"""
from abc import ABC, abstractmethod

from domain.entities.location import ResolvedLocation
from domain.value_objects.location_input import LocationInput


class IResolveLocationUseCase(ABC):
    """Interface para caso de uso de resolução de localização"""

    @abstractmethod
    async def resolve(self, location_input: LocationInput) -> ResolvedLocation:
        """
        Resolve cidade ou coordenadas em coordenadas + nome de exibição

        Raises:
            InvalidCoordinateError: Coordenadas fora do intervalo
            LocationNotFoundError: Geocoding sem resultados
            UpstreamUnavailableError: Falha do serviço de geocoding
        """
        pass
