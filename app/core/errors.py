"""Domain errors raised by services; routes map them to HTTP responses."""


class AppError(Exception):
    """Base class for expected failures. Carries a client-safe message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400


class UnauthorizedError(AppError):
    """Bad credentials or a missing, invalid or expired token."""

    status_code = 401


class ForbiddenError(AppError):
    """Authenticated, but the token does not carry the required role."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Duplicate name, or a row still referenced outside the cascade path."""

    status_code = 409


class ServerError(AppError):
    status_code = 500
