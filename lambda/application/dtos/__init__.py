"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.responses import (
    CurrentWeatherResponse,
    DailyWeatherResponse,
    ProxyWeatherResponse
)

__all__ = [
    'CurrentWeatherResponse',
    'DailyWeatherResponse',
    'ProxyWeatherResponse'
]
