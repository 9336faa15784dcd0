"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.dtos.responses import ProxyWeatherResponse
from application.use_cases.get_location_weather_use_case import GetLocationWeatherUseCase
from application.use_cases.resolve_location_use_case import LocationResolver

# Domain Layer
from domain.exceptions import (
    DomainException,
    InvalidInputError,
    LocationNotFoundError,
)
from domain.value_objects.location_input import CityInput, CoordinatesInput

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.weather_provider_factory import get_weather_provider_factory

# Shared Layer - Utilities
from shared.config.logger_config import get_logger
from shared.config.settings import CORS_ORIGIN
from shared.utils.validators import CityNameValidator, CoordinateValidator

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# Powertools resolve o handler pela MRO da exceção: InvalidCoordinateError
# cai em InvalidInputError, UpstreamUnavailableError/NoDataError em DomainException
# =============================

exception_service = ExceptionHandlerService(logger=logger)

app.exception_handler(InvalidInputError)(exception_service.handle_invalid_input)
app.exception_handler(LocationNotFoundError)(exception_service.handle_location_not_found)
app.exception_handler(DomainException)(exception_service.handle_weather_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def build_use_case() -> GetLocationWeatherUseCase:
    """Monta o use case com os providers da factory (singleton por container)"""
    factory = get_weather_provider_factory()
    resolver = LocationResolver(factory.get_geocoding_provider())
    return GetLocationWeatherUseCase(
        location_resolver=resolver,
        weather_provider=factory.get_weather_provider()
    )


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/weather")
def get_weather_route():
    """
    GET /weather?latitude=51.5074&longitude=-0.1278

    Proxy para o Open-Meteo no formato esperado pelo frontend:
    current (temperature, relativeHumidity, isDaytime, windSpeed, weatherCode)
    e daily (time, temperatureMax, temperatureMin, weatherCode).
    Temperaturas em °C, vento em m/s.
    """
    latitude = app.current_event.get_query_string_value(name="latitude", default_value=None)
    longitude = app.current_event.get_query_string_value(name="longitude", default_value=None)

    # Throws InvalidInputError / InvalidCoordinateError
    coordinates = CoordinateValidator.parse_query(latitude, longitude)

    use_case = build_use_case()
    weather = run_async(use_case.execute(CoordinatesInput(coordinates=coordinates)))

    return ProxyWeatherResponse.from_entity(weather).to_dict()


@app.get("/weather/city")
def get_city_weather_route():
    """
    GET /weather/city?name=London

    Resolve o nome via geocoding e devolve o esquema canônico
    (location, current, forecast com categorias e descrições).
    """
    name = CityNameValidator.validate(
        app.current_event.get_query_string_value(name="name", default_value=None)
    )

    use_case = build_use_case()
    weather = run_async(use_case.execute(CityInput(name=name)))

    return weather.to_api_response()


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Available routes:
    - GET /weather?latitude=<n>&longitude=<n>
    - GET /weather/city?name=<city>
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        user_agent=headers.get('User-Agent', headers.get('user-agent', 'N/A'))
    )

    response = app.resolve(event, context)

    if 'headers' not in response or response['headers'] is None:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,Authorization,X-Requested-With'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,OPTIONS'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Reutiliza o event loop entre invocações Lambda (warm starts), mantendo
    válida a sessão aiohttp vinculada a ele.
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
