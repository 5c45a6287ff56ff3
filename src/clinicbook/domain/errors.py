"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional

# Values of these fields are never echoed back in error details.
SENSITIVE_FIELDS = frozenset({"password"})


class DomainError(Exception):
    """Base domain error."""

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


class ValidationError(DomainError):
    """A field value violates its validation rule."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        self.field = field
        details: Dict[str, Any] = {"field": field}
        if field not in SENSITIVE_FIELDS and value is not None:
            details["value"] = value if isinstance(value, (int, str)) else repr(value)
        super().__init__(f"Invalid value for '{field}': {message}", "VALIDATION_ERROR", details)


class DoctorNotFoundError(DomainError):
    """Doctor not found."""

    def __init__(self, doctor_id: int) -> None:
        message = f"Doctor with ID '{doctor_id}' not found"
        super().__init__(message, "DOCTOR_NOT_FOUND", {"doctor_id": doctor_id})


class DuplicateDoctorError(DomainError):
    """Another doctor already uses this email address."""

    def __init__(self, email: str) -> None:
        message = f"Doctor with email '{email}' already exists"
        super().__init__(message, "DUPLICATE_DOCTOR", {"email": email})
