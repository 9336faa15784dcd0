"""Shared configuration"""
from .settings import FORECAST_DAYS, FORECAST_ENTRIES, CORS_ORIGIN
from .logger_config import get_logger, logger

__all__ = ['FORECAST_DAYS', 'FORECAST_ENTRIES', 'CORS_ORIGIN', 'get_logger', 'logger']
