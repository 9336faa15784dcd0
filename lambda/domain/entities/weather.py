"""
Weather Entity - Condições atuais no esquema canônico da aplicação
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.constants import WeatherCategory, WeatherCondition
from domain.value_objects.temperature import Temperature, TemperatureScale
from domain.value_objects.wind_speed import WindSpeed, WindSpeedUnit


@dataclass
class CurrentConditions:
    """Entidade Condições Atuais"""
    temperature: float  # °C
    humidity: float  # %
    wind_speed: float  # m/s
    observation_date: date
    weather_code: Optional[int] = None  # Código WMO bruto do provider
    is_day: bool = True  # True = dia, False = noite
    category: Optional[WeatherCategory] = None
    description: str = ""

    def __post_init__(self):
        """Classifica pela tabela WMO quando categoria/descrição não vierem prontas"""
        if self.category is None or self.description == "":
            category, desc = WeatherCondition.classify_wmo_code(self.weather_code)
            if self.category is None:
                self.category = category
            if self.description == "":
                self.description = desc

    def temperature_in(self, scale: TemperatureScale) -> float:
        return Temperature(celsius=self.temperature).in_scale(scale)

    def wind_speed_in(self, unit: WindSpeedUnit) -> float:
        return WindSpeed(mps=self.wind_speed).in_unit(unit)

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API (rota canônica)"""
        return {
            'date': self.observation_date.isoformat(),
            'temperature': round(self.temperature, 1),
            'humidity': round(self.humidity, 1),
            'windSpeed': round(self.wind_speed, 2),
            'weatherCode': self.weather_code,
            'category': self.category.value,
            'description': self.description,
            'isDay': self.is_day
        }
