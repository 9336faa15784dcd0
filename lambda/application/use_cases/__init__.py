"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_location_weather_use_case import GetLocationWeatherUseCase
from .resolve_location_use_case import LocationResolver

__all__ = [
    'GetLocationWeatherUseCase',
    'LocationResolver'
]
