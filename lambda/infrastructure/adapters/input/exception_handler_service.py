"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
Toda resposta de erro segue o envelope {success: false, error, type, message, details?, timestamp}
"""
import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    DomainException,
    InvalidParameterException,
    LocationNotFoundException,
    UpstreamProviderException,
)
from shared.config.logger_config import logger as app_logger
from shared.utils.datetime_parser import DateTimeParser


def _error_response(
    status_code: int,
    error: str,
    error_type: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    **extra: Any
) -> Response:
    body: Dict[str, Any] = {
        "success": False,
        "error": error,
        "type": error_type,
        "message": message,
    }
    if details:
        body["details"] = details
    body.update(extra)
    body["timestamp"] = DateTimeParser.to_iso_utc(DateTimeParser.utc_now())

    return Response(
        status_code=status_code,
        content_type="application/json",
        body=json.dumps(body, ensure_ascii=False)
    )


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
    def handle_invalid_parameter(ex: InvalidParameterException) -> Response:
        """Handle 400 - Missing or malformed query parameter"""
        ExceptionHandlerService.logger.warning("Invalid parameter", error=str(ex), details=ex.details)
        return _error_response(400, "Invalid parameter", type(ex).__name__, ex.message, ex.details)

    @staticmethod
    def handle_not_found(ex: DomainException) -> Response:
        """Handle 404 - Station, capital or weather data not found"""
        ExceptionHandlerService.logger.warning("Resource not found", error=str(ex), details=ex.details)
        return _error_response(404, "Not found", type(ex).__name__, ex.message, ex.details)

    @staticmethod
    def handle_location_not_found(ex: LocationNotFoundException) -> Response:
        """Handle 404 - Geocoding without Brazilian results"""
        ExceptionHandlerService.logger.info("Location not found", details=ex.details)
        details = {key: value for key, value in ex.details.items() if key != "results"}
        return _error_response(404, ex.message, type(ex).__name__, ex.message, details, results=[])

    @staticmethod
    def handle_upstream_error(ex: UpstreamProviderException) -> Response:
        """Handle 500 - Upstream failure without cached fallback"""
        ExceptionHandlerService.logger.error("Upstream provider error", error=str(ex), details=ex.details)
        return _error_response(500, "Failed to fetch upstream data", type(ex).__name__, ex.message, ex.details)

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return _error_response(400, "Validation error", "ValidationError", str(ex))

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return _error_response(500, "Internal server error", "InternalServerError", "An unexpected error occurred")
