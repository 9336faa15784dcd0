"""Domain Entities"""
from .daily_forecast import DailyForecastEntry
from .location import ResolvedLocation
from .weather import CurrentConditions
from .weather_data import WeatherData

__all__ = ['CurrentConditions', 'DailyForecastEntry', 'ResolvedLocation', 'WeatherData']
