"""
Use Case: Resolve Location
Traduz CityInput/CoordinatesInput em coordenadas + nome de exibição
"""
from ddtrace import tracer

from application.ports.input.resolve_location_port import IResolveLocationUseCase
from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.entities.location import ResolvedLocation
from domain.exceptions import InvalidInputError, LocationNotFoundError
from domain.value_objects.location_input import CityInput, CoordinatesInput, LocationInput
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class LocationResolver(IResolveLocationUseCase):
    """
    Resolve a entrada de localização do usuário

    - CoordinatesInput: devolve as coordenadas sem alteração
      (a validação de intervalo acontece no value object Coordinates)
    - CityInput: consulta o geocoding e usa o primeiro resultado; o nome
      exibido vem do geocoding, não do texto digitado
    """

    def __init__(self, geocoding_provider: IGeocodingProvider):
        self.geocoding_provider = geocoding_provider

    @tracer.wrap(resource="use_case.resolve_location")
    async def resolve(self, location_input: LocationInput) -> ResolvedLocation:
        if isinstance(location_input, CoordinatesInput):
            coordinates = location_input.coordinates
            return ResolvedLocation(
                coordinates=coordinates,
                display_name=str(coordinates)
            )

        if isinstance(location_input, CityInput):
            location = await self.geocoding_provider.search(location_input.name)
            if location is None:
                logger.warning("Location not found", city=location_input.name)
                raise LocationNotFoundError(
                    f"City not found: {location_input.name}",
                    details={"name": location_input.name}
                )

            logger.info(
                "Location resolved",
                city=location_input.name,
                display_name=location.display_name,
                latitude=location.latitude,
                longitude=location.longitude
            )
            return location

        raise InvalidInputError(
            f"Unsupported location input: {type(location_input).__name__}",
            details={"type": type(location_input).__name__}
        )
