"""
Error handling utilities and decorators.
"""
import functools
from typing import Any, Callable, Optional
from .logging_config import get_logger
from .exceptions import PlaygroundError


logger = get_logger(__name__)


def handle_errors(
    default_return: Any = None,
    raise_on_error: bool = False,
    log_level: str = "ERROR"
):
    """
    Decorator for handling playground errors in functions.

    Only ``PlaygroundError`` subclasses are handled; anything else propagates.

    Args:
        default_return: Value to return on error
        raise_on_error: Whether to re-raise the exception
        log_level: Logging level for errors
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PlaygroundError as e:
                log_method = getattr(logger, log_level.lower())
                log_method(
                    f"Playground error in {func.__name__}: {e.message}",
                    extra={'error_details': e.to_dict()}
                )
                if raise_on_error:
                    raise
                return default_return

        return wrapper
    return decorator


class ErrorContext:
    """Context manager for error handling with cleanup."""

    def __init__(
        self,
        operation_name: str,
        cleanup_func: Optional[Callable] = None,
        raise_on_error: bool = True
    ):
        self.operation_name = operation_name
        self.cleanup_func = cleanup_func
        self.raise_on_error = raise_on_error
        self.logger = get_logger(__name__)

    def __enter__(self):
        self.logger.info(f"Starting operation: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.logger.error(
                f"Error in operation {self.operation_name}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )

            if self.cleanup_func:
                try:
                    self.cleanup_func()
                except Exception as cleanup_error:
                    self.logger.error(
                        f"Error during cleanup: {cleanup_error}",
                        exc_info=True
                    )

            # Suppress exception if raise_on_error is False
            return not self.raise_on_error

        self.logger.info(f"Completed operation: {self.operation_name}")
        return False
