from typing import Optional

from ..domain.errors import (
    DoctorNotFoundError,
    DomainError,
    DuplicateDoctorError,
    ValidationError as DomainValidationError,
)


class APIError(Exception):
    def __init__(self, code: str, message: str, http_status: int = 400, details: Optional[dict] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.details = details


class ValidationError(APIError):
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__("INVALID_INPUT", message, 422, details)


class NotFoundError(APIError):
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__("NOT_FOUND", message, 404, details)


class ConflictError(APIError):
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__("CONFLICT", message, 409, details)


def from_domain_error(exc: DomainError) -> APIError:
    """Map a domain error onto its HTTP counterpart."""
    if isinstance(exc, DomainValidationError):
        return ValidationError(exc.message, exc.details)
    if isinstance(exc, DoctorNotFoundError):
        return NotFoundError(exc.message, exc.details)
    if isinstance(exc, DuplicateDoctorError):
        return ConflictError(exc.message, exc.details)
    return APIError(exc.error_code or "DOMAIN_ERROR", exc.message, 400, exc.details)
