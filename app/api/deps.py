"""Request dependencies: app-owned settings and bearer-token authentication."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import get_db
from app.core.security import (
    ADMIN_ROLE,
    TokenError,
    decode_access_token,
    subject_id,
)
from app.models import AdminUser, User
from app.schemas.auth import CurrentAdmin, CurrentUser

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (see create_app)."""
    return request.app.state.settings


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> dict:
    """Dependency: verify the Bearer token's signature and expiry and return its claims."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    try:
        return decode_access_token(credentials.credentials, settings)
    except TokenError as e:
        raise _unauthorized(e.message) from e


def get_current_user(
    claims: Annotated[dict, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a member token whose subject still exists."""
    if claims.get("role") == ADMIN_ROLE:
        raise _unauthorized("Member token required")
    try:
        user_id = subject_id(claims)
    except TokenError as e:
        raise _unauthorized(e.message) from e
    user = db.get(User, user_id)
    if user is None:
        raise _unauthorized("User not found")
    return CurrentUser(id=user.id, name=user.name, rating=float(user.rating or 0))


def require_admin(
    claims: Annotated[dict, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentAdmin:
    """Dependency: require a valid admin-role token for an existing admin. 403 for other roles."""
    if claims.get("role") != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    try:
        admin_id = subject_id(claims)
    except TokenError as e:
        raise _unauthorized(e.message) from e
    admin = db.get(AdminUser, admin_id)
    if admin is None:
        raise _unauthorized("Admin not found")
    return CurrentAdmin(id=admin.id, name=admin.name)
