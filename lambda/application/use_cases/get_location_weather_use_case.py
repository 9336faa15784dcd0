"""
Async Use Case: Get Location Weather
Fluxo: entrada de localização -> resolver -> provider -> WeatherData
"""
from ddtrace import tracer

from application.ports.input.get_location_weather_port import IGetLocationWeatherUseCase
from application.ports.input.resolve_location_port import IResolveLocationUseCase
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.weather_data import WeatherData
from domain.value_objects.location_input import LocationInput
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetLocationWeatherUseCase(IGetLocationWeatherUseCase):
    """Async use case: clima atual + previsão para uma cidade ou coordenada"""

    def __init__(
        self,
        location_resolver: IResolveLocationUseCase,
        weather_provider: IWeatherProvider
    ):
        self.location_resolver = location_resolver
        self.weather_provider = weather_provider

    @tracer.wrap(resource="use_case.get_location_weather")
    async def execute(self, location_input: LocationInput) -> WeatherData:
        """
        Execute use case asynchronously

        Args:
            location_input: CityInput ou CoordinatesInput

        Returns:
            WeatherData com location_name preenchido pelo resolver

        Raises:
            InvalidCoordinateError, LocationNotFoundError,
            UpstreamUnavailableError, NoDataError
        """
        location = await self.location_resolver.resolve(location_input)

        weather = await self.weather_provider.fetch_weather(location.coordinates)
        weather.location_name = location.display_name

        logger.info(
            "Weather fetched",
            provider=self.weather_provider.provider_name,
            location=location.display_name,
            forecast_days=len(weather.forecast)
        )
        return weather
