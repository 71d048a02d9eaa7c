"""Error definitions for dotpath."""

from typing import Any, Dict


class DotPathError(Exception):
    """Base exception for all dotpath errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class InvalidArgumentError(DotPathError, ValueError):
    """An operation received None (or a non-string) where a path string was required."""
    pass


def require_path(value: Any, parameter: str, operation: str) -> str:
    """
    Validate that a path argument is a string.

    Empty strings are valid paths and pass unchanged.

    Args:
        value: Argument to check
        parameter: Parameter name used in the error message
        operation: Name of the calling operation, recorded in the error context

    Returns:
        The value itself

    Raises:
        InvalidArgumentError: If value is None or not a str
    """
    if value is None:
        raise InvalidArgumentError(
            f"{parameter} must not be None",
            parameter=parameter,
            operation=operation,
        )
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{parameter} must be a string, got {type(value).__name__}",
            parameter=parameter,
            operation=operation,
        )
    return value
