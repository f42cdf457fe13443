"""Shared configuration"""
from .settings import SERVICE_NAME, NOMINATIM_USER_AGENT
from .logger_config import get_logger, logger

__all__ = ['SERVICE_NAME', 'NOMINATIM_USER_AGENT', 'get_logger', 'logger']
