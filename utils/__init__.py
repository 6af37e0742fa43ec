"""
Utility modules for FactoryPlayground.
"""
from .logging_config import get_logger, LoggerFactory, LogContext
from .exceptions import (
    PlaygroundError,
    FactoryError,
    UnsupportedDiscriminant,
    InvalidPayload,
    RegistrationError,
    ValidationError,
    ConfigurationError
)
from .error_handlers import handle_errors, ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'PlaygroundError',
    'FactoryError',
    'UnsupportedDiscriminant',
    'InvalidPayload',
    'RegistrationError',
    'ValidationError',
    'ConfigurationError',
    'handle_errors',
    'ErrorContext',
]
