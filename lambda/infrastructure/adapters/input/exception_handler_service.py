"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from typing import Optional

from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    DomainException,
    InvalidCoordinatesException,
    InvalidDateTimeException,
    InvalidRequestException,
    WeatherDataNotFoundException,
    WeatherProviderException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas

    Mapeamento:
        InvalidCoordinates / InvalidDateTime / InvalidRequest / ValueError -> 400
        WeatherDataNotFound -> 404
        WeatherProvider -> 502
        Exception -> 500
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _domain_response(
        status_code: int,
        error: str,
        ex: DomainException,
        error_type: Optional[str] = None
    ) -> Response:
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps({
                "type": error_type or type(ex).__name__,
                "error": error,
                "message": ex.message,
                "details": ex.details
            }, default=str)
        )

    @staticmethod
    def handle_invalid_coordinates(ex: InvalidCoordinatesException) -> Response:
        """Handle 400 - Invalid coordinates"""
        ExceptionHandlerService.logger.warning("Invalid coordinates", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(400, "Invalid coordinates", ex)

    @staticmethod
    def handle_invalid_datetime(ex: InvalidDateTimeException) -> Response:
        """Handle 400 - Invalid date format"""
        ExceptionHandlerService.logger.warning("Invalid date", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(400, "Invalid date", ex)

    @staticmethod
    def handle_invalid_request(ex: InvalidRequestException) -> Response:
        """Handle 400 - Malformed request body"""
        ExceptionHandlerService.logger.warning("Invalid request", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(400, "Invalid request", ex)

    @staticmethod
    def handle_weather_data_not_found(ex: WeatherDataNotFoundException) -> Response:
        """Handle 404 - Weather data not available"""
        ExceptionHandlerService.logger.warning("Weather data not found", error=str(ex), details=ex.details)
        return ExceptionHandlerService._domain_response(404, "Weather data not found", ex)

    @staticmethod
    def handle_weather_provider_error(ex: WeatherProviderException) -> Response:
        """Handle 502 - Upstream weather provider error"""
        ExceptionHandlerService.logger.error(
            "Weather provider error", error=str(ex), details=ex.details, exc_info=True
        )
        return ExceptionHandlerService._domain_response(502, "Weather provider error", ex)

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError, JSON inválido)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return Response(
            status_code=400,
            content_type="application/json",
            body=json.dumps({
                "type": "ValidationError",
                "error": "Validation error",
                "message": str(ex)
            })
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return Response(
            status_code=500,
            content_type="application/json",
            body=json.dumps({
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            })
        )
