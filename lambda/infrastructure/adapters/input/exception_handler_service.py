"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado

As respostas de erro são texto puro: o cliente (UI) exibe a mensagem
diretamente ao usuário.
"""
from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    DomainException,
    InvalidInputError,
    LocationNotFoundError,
)
from shared.config.logger_config import logger as app_logger

TEXT_PLAIN = "text/plain"


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_invalid_input(ex: InvalidInputError) -> Response:
        """Handle 400 - Parâmetros ausentes/inválidos ou coordenadas fora do intervalo"""
        ExceptionHandlerService.logger.warning("Invalid input", error=str(ex), details=ex.details)
        return Response(
            status_code=400,
            content_type=TEXT_PLAIN,
            body=ex.message
        )

    @staticmethod
    def handle_location_not_found(ex: LocationNotFoundError) -> Response:
        """Handle 404 - Geocoding sem resultados"""
        ExceptionHandlerService.logger.warning("Location not found", error=str(ex), details=ex.details)
        return Response(
            status_code=404,
            content_type=TEXT_PLAIN,
            body=ex.message
        )

    @staticmethod
    def handle_weather_error(ex: DomainException) -> Response:
        """
        Handle 500 - Qualquer falha do provider (UpstreamUnavailableError, NoDataError)

        O status não distingue o tipo de erro; o tipo vai apenas para o log.
        """
        ExceptionHandlerService.logger.error(
            "Weather fetch failed",
            error=str(ex),
            error_type=type(ex).__name__,
            details=ex.details
        )
        return Response(
            status_code=500,
            content_type=TEXT_PLAIN,
            body=f"Failed to fetch weather data: {ex.message}"
        )

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return Response(
            status_code=400,
            content_type=TEXT_PLAIN,
            body=str(ex)
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return Response(
            status_code=500,
            content_type=TEXT_PLAIN,
            body="Internal server error"
        )
