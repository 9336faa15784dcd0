"""
Configurações centralizadas da aplicação
Todos os valores podem ser sobrescritos por variáveis de ambiente
"""
import os


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _env_choice(name: str, default: str, choices: tuple) -> str:
    value = os.environ.get(name, default).strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


# Open-Meteo (não requer chave de API)
OPENMETEO_BASE_URL = os.environ.get('OPENMETEO_BASE_URL', 'https://api.open-meteo.com/v1')
GEOCODING_BASE_URL = os.environ.get('GEOCODING_BASE_URL', 'https://geocoding-api.open-meteo.com/v1')

# Unidades solicitadas ao provider (o mapper normaliza para °C e m/s)
OPENMETEO_TEMPERATURE_UNIT = _env_choice(
    'OPENMETEO_TEMPERATURE_UNIT', 'celsius', ('celsius', 'fahrenheit')
)
OPENMETEO_WIND_SPEED_UNIT = _env_choice(
    'OPENMETEO_WIND_SPEED_UNIT', 'kmh', ('kmh', 'ms', 'mph', 'kn')
)

# Previsão
FORECAST_DAYS = _env_int('FORECAST_DAYS', 7)  # dias pedidos ao provider (inclui hoje)
FORECAST_ENTRIES = _env_int('FORECAST_ENTRIES', 5)  # dias devolvidos após descartar hoje

# Geocoding
GEOCODING_LANGUAGE = os.environ.get('GEOCODING_LANGUAGE', 'en')

# HTTP (segundos)
HTTP_TIMEOUT_TOTAL = _env_int('HTTP_TIMEOUT_TOTAL', 10)
HTTP_TIMEOUT_CONNECT = _env_int('HTTP_TIMEOUT_CONNECT', 3)
HTTP_TIMEOUT_READ = _env_int('HTTP_TIMEOUT_READ', 8)

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')

# Logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
