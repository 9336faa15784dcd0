"""
Input Ports - Interfaces dos casos de uso expostos aos adapters de entrada
"""

from .get_location_weather_port import IGetLocationWeatherUseCase
from .resolve_location_port import IResolveLocationUseCase

__all__ = ['IGetLocationWeatherUseCase', 'IResolveLocationUseCase']
