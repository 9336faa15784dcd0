"""
Input Port: Interface para buscar dados climáticos de uma localização
"""
from abc import ABC, abstractmethod

from domain.entities.weather_data import WeatherData
from domain.value_objects.location_input import LocationInput


class IGetLocationWeatherUseCase(ABC):
    """Interface para caso de uso de buscar dados climáticos"""

    @abstractmethod
    async def execute(self, location_input: LocationInput) -> WeatherData:
        """
        Busca dados climáticos de uma cidade ou coordenada

        Args:
            location_input: CityInput ou CoordinatesInput

        Returns:
            WeatherData: Condições atuais + previsão diária
        """
        pass
