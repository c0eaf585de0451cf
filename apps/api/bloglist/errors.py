"""Application exception types."""

from bloglist.schemas.error import ErrorResponse


class ApiError(Exception):
    """Structured API error that maps directly to an ``{"error": ...}`` payload."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.payload = ErrorResponse(error=message, code=self.code)
        super().__init__(message)


class ValidationError(ApiError):
    status_code = 400
    code = "VALIDATION_ERROR"


class MalformedIdentifierError(ApiError):
    status_code = 400
    code = "MALFORMED_ID"

    def __init__(self, message: str = "malformatted id") -> None:
        super().__init__(message)


class AuthenticationError(ApiError):
    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "token missing or invalid") -> None:
        super().__init__(message)


class AuthorizationError(ApiError):
    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(ApiError):
    status_code = 404
    code = "RESOURCE_NOT_FOUND"


__all__ = [
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "MalformedIdentifierError",
    "NotFoundError",
    "ValidationError",
]
