"""Administrator operations over member records: list, rate, delete."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import FOREIGN_KEY_VIOLATION, integrity_code
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import User
from app.schemas.admin import UserRecord

logger = logging.getLogger(__name__)

RATING_QUANTUM = Decimal("0.01")
# NUMERIC(10, 2) holds at most 8 integer digits.
RATING_MAX = Decimal("99999999.99")


def _to_record(user: User) -> UserRecord:
    # Postgres NUMERIC comes back as Decimal (and as str from some drivers).
    rating = float(user.rating) if user.rating is not None else 0.0
    return UserRecord(id=user.id, name=user.name, rating=rating)


def parse_rating(value: Any) -> Decimal:
    """
    Validate a requested rating and round it half-up to two decimals.

    Accepts ints, floats and numeric strings. Raises ValidationError for
    booleans, non-numbers, NaN/infinity and negatives.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValidationError("Rating must be a non-negative number")
    try:
        number = float(value)
    except (ValueError, OverflowError) as e:
        raise ValidationError("Rating must be a non-negative number") from e
    if not math.isfinite(number) or number < 0:
        raise ValidationError("Rating must be a non-negative number")
    exact = Decimal(str(value).strip())
    if exact > RATING_MAX:
        raise ValidationError(f"Rating must be at most {RATING_MAX}")
    return exact.quantize(RATING_QUANTUM, rounding=ROUND_HALF_UP)


def list_users(db: Session) -> list[UserRecord]:
    """All members ordered by id, with rating as a float."""
    users = db.query(User).order_by(User.id).all()
    return [_to_record(u) for u in users]


def update_rating(db: Session, user_id: int, new_rating: Any) -> UserRecord:
    """Set a member's rating. Raises ValidationError or NotFoundError."""
    rating = parse_rating(new_rating)
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    user.rating = rating
    db.commit()
    db.refresh(user)
    logger.info(
        "User rating updated",
        extra={"user_id": user_id, "rating": str(rating)},
    )
    return _to_record(user)


def delete_user(db: Session, user_id: int) -> int:
    """
    Delete a member; their books go with the FK cascade.

    Raises NotFoundError if absent, ConflictError if another table still
    references the row without a cascade.
    """
    try:
        deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        if deleted == 0:
            db.rollback()
            raise NotFoundError("User not found")
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if integrity_code(e) == FOREIGN_KEY_VIOLATION:
            raise ConflictError("User is still referenced by other records") from e
        raise
    logger.info("User deleted", extra={"user_id": user_id})
    return user_id
