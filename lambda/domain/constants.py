"""
Domain Constants - Todas as constantes da aplicação centralizadas
Inclui a tabela fixa de códigos WMO usada pelo Open-Meteo
"""
from enum import Enum
from typing import Dict, Optional, Tuple

from shared.config import settings


class API:
    """Constantes de APIs externas"""

    # Open-Meteo
    OPENMETEO_BASE_URL = settings.OPENMETEO_BASE_URL
    OPENMETEO_FORECAST_PATH = "/forecast"
    GEOCODING_BASE_URL = settings.GEOCODING_BASE_URL
    GEOCODING_SEARCH_PATH = "/search"

    # Campos pedidos ao endpoint /forecast
    CURRENT_FIELDS = (
        'temperature_2m',
        'relative_humidity_2m',
        'is_day',
        'wind_speed_10m',
        'weather_code',
    )
    DAILY_FIELDS = (
        'weather_code',
        'temperature_2m_max',
        'temperature_2m_min',
    )

    # Timeouts HTTP
    HTTP_TIMEOUT_TOTAL = settings.HTTP_TIMEOUT_TOTAL  # segundos
    HTTP_TIMEOUT_CONNECT = settings.HTTP_TIMEOUT_CONNECT  # segundos
    HTTP_TIMEOUT_READ = settings.HTTP_TIMEOUT_READ  # segundos


class Forecast:
    """Constantes da previsão diária"""

    DAYS_REQUESTED = settings.FORECAST_DAYS
    ENTRIES_RETURNED = settings.FORECAST_ENTRIES
    TEMPERATURE_UNIT = settings.OPENMETEO_TEMPERATURE_UNIT
    WIND_SPEED_UNIT = settings.OPENMETEO_WIND_SPEED_UNIT


class Units:
    """Fatores de conversão para as unidades canônicas (°C e m/s)"""

    KMH_PER_MPS = 3.6
    MPS_PER_MPH = 0.44704
    MPS_PER_KNOT = 0.514444
    ABSOLUTE_ZERO_CELSIUS = -273.15


class WeatherCategory(Enum):
    """Categorias de condição climática exibidas pela aplicação"""
    CLEAR = "Clear"
    FEW_CLOUDS = "FewClouds"
    SCATTERED_CLOUDS = "ScatteredClouds"
    BROKEN_CLOUDS = "BrokenClouds"
    MIST = "Mist"
    RAIN = "Rain"
    SHOWER_RAIN = "ShowerRain"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"
    UNKNOWN = "Unknown"


class WeatherCondition:
    """
    Tabela de códigos meteorológicos WMO (Code Table 4677) usada pelo Open-Meteo

    Mapeamento fixo código -> (categoria, descrição). Qualquer código fora da
    tabela é classificado como UNKNOWN / "Unknown".
    """

    UNKNOWN_DESC = "Unknown"

    WMO_CODES: Dict[int, Tuple[WeatherCategory, str]] = {
        0: (WeatherCategory.CLEAR, "Clear sky"),
        1: (WeatherCategory.FEW_CLOUDS, "Mainly clear"),
        2: (WeatherCategory.SCATTERED_CLOUDS, "Partly cloudy"),
        3: (WeatherCategory.BROKEN_CLOUDS, "Overcast"),
        # Nevoeiro
        45: (WeatherCategory.MIST, "Foggy"),
        48: (WeatherCategory.MIST, "Depositing rime fog"),
        # Garoa
        51: (WeatherCategory.RAIN, "Light drizzle"),
        53: (WeatherCategory.RAIN, "Moderate drizzle"),
        55: (WeatherCategory.RAIN, "Dense drizzle"),
        56: (WeatherCategory.RAIN, "Light freezing drizzle"),
        57: (WeatherCategory.RAIN, "Dense freezing drizzle"),
        # Chuva
        61: (WeatherCategory.RAIN, "Slight rain"),
        63: (WeatherCategory.RAIN, "Moderate rain"),
        65: (WeatherCategory.RAIN, "Heavy rain"),
        66: (WeatherCategory.RAIN, "Light freezing rain"),
        67: (WeatherCategory.RAIN, "Heavy freezing rain"),
        # Neve
        71: (WeatherCategory.SNOW, "Slight snow"),
        73: (WeatherCategory.SNOW, "Moderate snow"),
        75: (WeatherCategory.SNOW, "Heavy snow"),
        77: (WeatherCategory.SNOW, "Snow grains"),
        # Pancadas
        80: (WeatherCategory.SHOWER_RAIN, "Slight rain showers"),
        81: (WeatherCategory.SHOWER_RAIN, "Moderate rain showers"),
        82: (WeatherCategory.SHOWER_RAIN, "Violent rain showers"),
        85: (WeatherCategory.SNOW, "Slight snow showers"),
        86: (WeatherCategory.SNOW, "Heavy snow showers"),
        # Tempestade
        95: (WeatherCategory.THUNDERSTORM, "Thunderstorm"),
        96: (WeatherCategory.THUNDERSTORM, "Thunderstorm with slight hail"),
        99: (WeatherCategory.THUNDERSTORM, "Thunderstorm with heavy hail"),
    }

    @staticmethod
    def classify_wmo_code(code: Optional[int]) -> Tuple[WeatherCategory, str]:
        """
        Classifica um código WMO

        Args:
            code: Código numérico retornado pelo provider (pode ser None)

        Returns:
            Tupla (categoria, descrição)
        """
        if code is None or isinstance(code, bool):
            return WeatherCategory.UNKNOWN, WeatherCondition.UNKNOWN_DESC
        try:
            key = int(code)
        except (TypeError, ValueError):
            return WeatherCategory.UNKNOWN, WeatherCondition.UNKNOWN_DESC
        if key != code:
            # 61.5 não é um código WMO
            return WeatherCategory.UNKNOWN, WeatherCondition.UNKNOWN_DESC
        return WeatherCondition.WMO_CODES.get(
            key,
            (WeatherCategory.UNKNOWN, WeatherCondition.UNKNOWN_DESC)
        )
