"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Name and password for register or login. Presence is checked by the route (400, not 422)."""

    name: str | None = Field(default=None, description="Account name")
    password: str | None = Field(default=None, description="Password")


class RegisterResponse(BaseModel):
    message: str = "User registered"
    userid: int


class LoginResponse(BaseModel):
    """Issued bearer token. Send it as: Authorization: Bearer <token>"""

    message: str
    userid: int
    token: str


class CurrentUser(BaseModel):
    """Authenticated member resolved from a bearer token."""

    id: int
    name: str
    rating: float


class CurrentAdmin(BaseModel):
    """Authenticated administrator resolved from an admin-role bearer token."""

    id: int
    name: str
