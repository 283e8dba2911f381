"""Admin console: admin login and member management (admin token required)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_app_settings, require_admin
from app.core.config import Settings
from app.core.database import get_db
from app.core.errors import AppError
from app.schemas.admin import (
    MessageResponse,
    RatingUpdateRequest,
    RatingUpdateResponse,
    UserRecord,
)
from app.schemas.auth import CredentialsRequest, CurrentAdmin, LoginResponse
from app.services import admin as admin_service
from app.services import auth as auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def admin_login(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """Authenticate against the admin table; the token carries role=admin."""
    try:
        name, password = auth_service.require_credentials(
            body.name, body.password, message="Admin name and password required"
        )
        admin_id, token = auth_service.admin_login(db, name, password, settings)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception("Admin login failed")
        raise HTTPException(status_code=500, detail="Admin login failed") from e
    return LoginResponse(message="Admin login successful", userid=admin_id, token=token)


@router.get("/users", response_model=list[UserRecord])
def list_users(
    _admin: Annotated[CurrentAdmin, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRecord]:
    """All members ordered by id."""
    try:
        return admin_service.list_users(db)
    except SQLAlchemyError as e:
        logger.exception("Listing users failed")
        raise HTTPException(status_code=500, detail="Failed to fetch users") from e


@router.put("/users/{user_id}/rating", response_model=RatingUpdateResponse)
def update_rating(
    user_id: int,
    body: RatingUpdateRequest,
    admin: Annotated[CurrentAdmin, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RatingUpdateResponse:
    """Set a member's rating (non-negative, stored to two decimals)."""
    try:
        user = admin_service.update_rating(db, user_id, body.newRating)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception("Rating update failed", extra={"user_id": user_id})
        raise HTTPException(status_code=500, detail="Failed to update rating") from e
    logger.info("Rating set by admin", extra={"admin_id": admin.id, "user_id": user_id})
    return RatingUpdateResponse(message="Rating updated", user=user)


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    admin: Annotated[CurrentAdmin, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a member and, through the FK cascade, their book listings."""
    try:
        admin_service.delete_user(db, user_id)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception("User delete failed", extra={"user_id": user_id})
        raise HTTPException(status_code=500, detail="Failed to delete user") from e
    logger.info("User removed by admin", extra={"admin_id": admin.id, "user_id": user_id})
    return MessageResponse(message=f"User {user_id} deleted")
