"""Open-Meteo mappers"""
from .openmeteo_data_mapper import OpenMeteoDataMapper

__all__ = ['OpenMeteoDataMapper']
