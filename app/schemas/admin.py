"""Request/response schemas for the admin console."""

from typing import Any

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """Member as shown to admins (no password hash)."""

    id: int
    name: str
    rating: float


class RatingUpdateRequest(BaseModel):
    # Left untyped so the service can reject bad values with a 400 and its own message.
    newRating: Any = Field(default=None, description="Non-negative rating; stored to two decimals")


class RatingUpdateResponse(BaseModel):
    message: str
    user: UserRecord


class MessageResponse(BaseModel):
    message: str
