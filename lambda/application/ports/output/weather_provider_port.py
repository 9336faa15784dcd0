"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod

from domain.entities.weather_data import WeatherData
from domain.value_objects.coordinates import Coordinates


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    A aplicação usa apenas Open-Meteo, mas mantemos a interface
    para facilitar troca futura de fonte.
    """

    @abstractmethod
    async def fetch_weather(self, coordinates: Coordinates) -> WeatherData:
        """
        Busca condições atuais + previsão diária em uma única chamada

        Args:
            coordinates: Coordenadas já validadas

        Returns:
            WeatherData no esquema canônico (°C, m/s)

        Raises:
            UpstreamUnavailableError: Falha de rede, timeout ou status não-2xx
            NoDataError: Resposta sem blocos current/daily
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenMeteo')"""
        pass
