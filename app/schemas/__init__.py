"""Pydantic request/response schemas."""

from app.schemas.admin import (
    MessageResponse,
    RatingUpdateRequest,
    RatingUpdateResponse,
    UserRecord,
)
from app.schemas.auth import (
    CredentialsRequest,
    CurrentAdmin,
    CurrentUser,
    LoginResponse,
    RegisterResponse,
)
from app.schemas.books import BookCreate, BookOut, Location, NearbyBook
from app.schemas.health import HealthResponse

__all__ = [
    "BookCreate",
    "BookOut",
    "CredentialsRequest",
    "CurrentAdmin",
    "CurrentUser",
    "HealthResponse",
    "Location",
    "LoginResponse",
    "MessageResponse",
    "NearbyBook",
    "RatingUpdateRequest",
    "RatingUpdateResponse",
    "RegisterResponse",
    "UserRecord",
]
