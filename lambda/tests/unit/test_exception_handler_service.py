"""
Testes para ExceptionHandlerService
Respostas de erro em texto puro
"""
from domain.exceptions import (
    InvalidCoordinateError,
    InvalidInputError,
    LocationNotFoundError,
    NoDataError,
    UpstreamUnavailableError,
)
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService


class TestExceptionHandlerService:
    """Testes para o serviço de tratamento de exceções"""

    def test_handle_invalid_input(self):
        """REGRA: InvalidInputError deve retornar 400 com a mensagem"""
        ex = InvalidInputError("Missing or invalid latitude/longitude parameters")
        response = ExceptionHandlerService.handle_invalid_input(ex)

        assert response.status_code == 400
        assert response.content_type == "text/plain"
        assert response.body == "Missing or invalid latitude/longitude parameters"

    def test_handle_invalid_coordinate(self):
        ex = InvalidCoordinateError("Invalid latitude: 91. Must be between -90 and 90 degrees.")
        response = ExceptionHandlerService.handle_invalid_input(ex)

        assert response.status_code == 400
        assert "Invalid latitude" in response.body

    def test_handle_location_not_found(self):
        """REGRA: LocationNotFoundError deve retornar 404"""
        ex = LocationNotFoundError("City not found: Xyzzyville", details={"name": "Xyzzyville"})
        response = ExceptionHandlerService.handle_location_not_found(ex)

        assert response.status_code == 404
        assert response.content_type == "text/plain"
        assert response.body == "City not found: Xyzzyville"

    def test_handle_upstream_error(self):
        """REGRA: Falha do provider deve retornar 500 com prefixo fixo"""
        ex = UpstreamUnavailableError("Weather provider returned HTTP 503", details={"status": 503})
        response = ExceptionHandlerService.handle_weather_error(ex)

        assert response.status_code == 500
        assert response.content_type == "text/plain"
        assert response.body == "Failed to fetch weather data: Weather provider returned HTTP 503"

    def test_handle_no_data_error(self):
        ex = NoDataError("No current weather data available")
        response = ExceptionHandlerService.handle_weather_error(ex)

        assert response.status_code == 500
        assert response.body == "Failed to fetch weather data: No current weather data available"

    def test_handle_value_error(self):
        response = ExceptionHandlerService.handle_value_error(ValueError("bad value"))

        assert response.status_code == 400
        assert response.body == "bad value"

    def test_handle_unexpected_error(self):
        response = ExceptionHandlerService.handle_unexpected_error(RuntimeError("boom"))

        assert response.status_code == 500
        assert response.body == "Internal server error"
