"""Application error types and the HTTP status each one maps to."""


class AppError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(AppError):
    status_code = 401
    default_message = "Authentication failed"


class TokenMissing(AuthError):
    default_message = "Access token required"


class TokenInvalid(AuthError):
    default_message = "Invalid or expired token"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


class AuthorizationError(AppError):
    status_code = 403
    default_message = "Access denied"


class Forbidden(AuthorizationError):
    default_message = "Admin access required"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class StorageError(AppError):
    """The document store could not be read or written."""
