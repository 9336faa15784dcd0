"""Response DTOs - Contratos de saída da API"""

from dataclasses import dataclass, asdict
from typing import List

from domain.entities.weather_data import WeatherData


@dataclass
class CurrentWeatherResponse:
    """Bloco "current" do proxy /weather"""
    temperature: float  # °C
    relativeHumidity: float  # %
    isDaytime: int  # 0 | 1
    windSpeed: float  # m/s
    weatherCode: int


@dataclass
class DailyWeatherResponse:
    """Bloco "daily" do proxy /weather (arrays paralelos)"""
    time: List[str]
    temperatureMax: List[float]
    temperatureMin: List[float]
    weatherCode: List[int]


@dataclass
class ProxyWeatherResponse:
    """Resposta do proxy GET /weather"""
    longitude: float
    latitude: float
    current: CurrentWeatherResponse
    daily: DailyWeatherResponse

    @staticmethod
    def from_entity(weather: WeatherData) -> 'ProxyWeatherResponse':
        """
        Converte WeatherData canônico para o formato do proxy

        Os arrays "daily" trazem a série completa do provider, com hoje no
        índice 0; o cliente descarta o primeiro dia por conta própria.

        Args:
            weather: WeatherData do domínio (°C, m/s)

        Returns:
            ProxyWeatherResponse DTO
        """
        current = weather.current
        series = weather.daily_series

        return ProxyWeatherResponse(
            longitude=weather.coordinates.longitude,
            latitude=weather.coordinates.latitude,
            current=CurrentWeatherResponse(
                temperature=current.temperature,
                relativeHumidity=current.humidity,
                isDaytime=1 if current.is_day else 0,
                windSpeed=round(current.wind_speed, 2),
                weatherCode=current.weather_code if current.weather_code is not None else 0
            ),
            daily=DailyWeatherResponse(
                time=[entry.date.isoformat() for entry in series],
                temperatureMax=[entry.temp_max for entry in series],
                temperatureMin=[entry.temp_min for entry in series],
                weatherCode=[
                    entry.weather_code if entry.weather_code is not None else 0
                    for entry in series
                ]
            )
        )

    def to_dict(self) -> dict:
        return asdict(self)
