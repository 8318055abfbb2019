"""Shared configuration"""
from .settings import APP_ENV, CORS_ORIGIN, HTTP_TIMEOUT_SECONDS, internal_base_url
from .logger_config import get_logger, logger

__all__ = ['APP_ENV', 'CORS_ORIGIN', 'HTTP_TIMEOUT_SECONDS', 'internal_base_url', 'get_logger', 'logger']
