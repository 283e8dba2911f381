"""Member registration and login."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_app_settings, get_current_user
from app.core.config import Settings
from app.core.database import get_db
from app.core.errors import AppError
from app.schemas.auth import CredentialsRequest, CurrentUser, LoginResponse, RegisterResponse
from app.services import auth as auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> RegisterResponse:
    """Create a member account. Returns only the new id, never the hash."""
    try:
        name, password = auth_service.require_credentials(body.name, body.password)
        user_id = auth_service.register(db, name, password, settings)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception("Registration failed")
        raise HTTPException(status_code=500, detail="Registration failed") from e
    return RegisterResponse(message="User registered", userid=user_id)


@router.post("/login", response_model=LoginResponse)
def login(
    body: CredentialsRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with name and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        name, password = auth_service.require_credentials(body.name, body.password)
        user_id, token = auth_service.login(db, name, password, settings)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail="Login failed") from e
    return LoginResponse(message="Login successful", userid=user_id, token=token)


@router.get("/me", response_model=CurrentUser)
def me(user: Annotated[CurrentUser, Depends(get_current_user)]) -> CurrentUser:
    """The member the bearer token belongs to."""
    return user
