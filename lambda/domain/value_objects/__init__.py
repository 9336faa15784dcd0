"""Domain Value Objects"""
from .coordinates import Coordinates
from .location_input import CityInput, CoordinatesInput, LocationInput
from .temperature import Temperature, TemperatureScale
from .wind_speed import WindSpeed, WindSpeedUnit

__all__ = [
    'Coordinates',
    'CityInput',
    'CoordinatesInput',
    'LocationInput',
    'Temperature',
    'TemperatureScale',
    'WindSpeed',
    'WindSpeedUnit',
]
