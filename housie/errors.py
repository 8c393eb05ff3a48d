"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class InvalidCountError(AppError):
    """Requested ticket count is out of bounds."""

    def __init__(self, message: str = "Invalid ticket count", details: Any | None = None) -> None:
        super().__init__(code="invalid_count", message=message, status_code=400, details=details)


class ConfigurationError(AppError):
    """Column ranges or caps cannot produce a valid ticket. Not retryable."""

    def __init__(self, message: str = "Invalid ticket configuration", details: Any | None = None) -> None:
        super().__init__(code="configuration_error", message=message, status_code=500, details=details)
