"""Registration and login for members and administrators."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import UNIQUE_VIOLATION, integrity_code
from app.core.errors import ConflictError, UnauthorizedError, ValidationError
from app.core.security import ADMIN_ROLE, create_access_token, hash_password, verify_password
from app.models import AdminUser, User

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

NAME_MAX_LEN = 255

DUPLICATE_NAME_MESSAGE = "User with this name already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
INVALID_ADMIN_CREDENTIALS_MESSAGE = "Invalid admin credentials"


def require_credentials(
    name: str | None,
    password: str | None,
    message: str = "Name and password required",
) -> tuple[str, str]:
    """Return (name, password) or raise ValidationError if either is missing."""
    if not name or not password or not name.strip():
        raise ValidationError(message)
    name = name.strip()
    if len(name) > NAME_MAX_LEN:
        raise ValidationError(f"Name must be at most {NAME_MAX_LEN} characters")
    return name, password


def register(db: Session, name: str, password: str, settings: "Settings") -> int:
    """Create a member and return only the new id. Raises ConflictError on duplicate name."""
    if db.query(User.id).filter(User.name == name).first() is not None:
        raise ConflictError(DUPLICATE_NAME_MESSAGE)

    user = User(
        name=name,
        password_hash=hash_password(password, rounds=settings.BCRYPT_ROUNDS),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # Lost a race with a concurrent register for the same name.
        if integrity_code(e) == UNIQUE_VIOLATION:
            raise ConflictError(DUPLICATE_NAME_MESSAGE) from e
        raise
    logger.info("User registered", extra={"user_id": user.id})
    return user.id


def login(db: Session, name: str, password: str, settings: "Settings") -> tuple[int, str]:
    """
    Check member credentials and issue a token with {id, name}.

    Unknown name and wrong password fail with the same message so callers
    cannot tell which accounts exist.
    """
    user = db.query(User).filter(User.name == name).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected", extra={"reason": "invalid_credentials"})
        raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
    token = create_access_token(user.id, user.name, settings)
    return user.id, token


def admin_login(db: Session, name: str, password: str, settings: "Settings") -> tuple[int, str]:
    """Check administrator credentials and issue a token with role=admin."""
    admin = db.query(AdminUser).filter(AdminUser.name == name).first()
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("Admin login rejected", extra={"reason": "invalid_credentials"})
        raise UnauthorizedError(INVALID_ADMIN_CREDENTIALS_MESSAGE)
    token = create_access_token(admin.id, admin.name, settings, role=ADMIN_ROLE)
    return admin.id, token
