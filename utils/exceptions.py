"""
Custom exception hierarchy for FactoryPlayground.
"""
from typing import Any, Dict, Optional


class PlaygroundError(Exception):
    """Base exception for all FactoryPlayground errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Factory Exceptions
class FactoryError(PlaygroundError):
    """Base exception for factory and registry errors."""
    pass


class UnsupportedDiscriminant(FactoryError):
    """Raised when a discriminant has no registered product."""

    def __init__(self, discriminant: Any, message: Optional[str] = None, **kwargs):
        super().__init__(
            message or f"No product registered for {discriminant!r}",
            **kwargs
        )
        self.discriminant = discriminant


class InvalidPayload(FactoryError):
    """Raised when a string payload cannot be parsed by a constructor."""

    def __init__(self, payload: Any, message: Optional[str] = None, **kwargs):
        super().__init__(
            message or f"Invalid payload: {payload!r}",
            **kwargs
        )
        self.payload = payload


class RegistrationError(FactoryError):
    """Raised when registry entries are inconsistent."""
    pass


# Data Exceptions
class ValidationError(PlaygroundError):
    """Raised when data validation fails."""
    pass


# Configuration Exceptions
class ConfigurationError(PlaygroundError):
    """Raised when configuration is invalid."""
    pass
