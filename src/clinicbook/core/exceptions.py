"""
Exception handling for clinicbook infrastructure.

Business rule violations live in ``clinicbook.domain.errors``; these
classes cover storage failures.
"""

from typing import Any, Dict, Optional


class ClinicBookException(Exception):
    """Base exception class for clinicbook infrastructure errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DatabaseError(ClinicBookException):
    """Raised when there's a database operation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "DATABASE_ERROR", details)
