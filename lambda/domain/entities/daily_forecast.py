"""
Daily Forecast Entity - Entidade de domínio para previsões diárias
Fonte: Open-Meteo API (série daily)
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.constants import WeatherCategory, WeatherCondition
from domain.value_objects.temperature import Temperature, TemperatureScale


@dataclass
class DailyForecastEntry:
    """
    Entidade de Previsão Diária

    Uma entrada por dia após o dia corrente; temperaturas sempre em Celsius.
    """
    date: date
    temp_max: float  # Temperatura máxima (°C)
    temp_min: float  # Temperatura mínima (°C)
    weather_code: Optional[int] = None  # Código WMO bruto
    category: Optional[WeatherCategory] = None
    description: str = ""

    def __post_init__(self):
        """Auto-classificação pela tabela WMO"""
        if self.category is None or self.description == "":
            category, desc = WeatherCondition.classify_wmo_code(self.weather_code)
            if self.category is None:
                self.category = category
            if self.description == "":
                self.description = desc

    def temp_max_in(self, scale: TemperatureScale) -> float:
        return Temperature(celsius=self.temp_max).in_scale(scale)

    def temp_min_in(self, scale: TemperatureScale) -> float:
        return Temperature(celsius=self.temp_min).in_scale(scale)

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'date': self.date.isoformat(),
            'tempMax': round(self.temp_max, 1),
            'tempMin': round(self.temp_min, 1),
            'weatherCode': self.weather_code,
            'category': self.category.value,
            'description': self.description
        }
