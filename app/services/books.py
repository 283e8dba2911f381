"""Book listings: a member's own shelf and the nearby-lenders search."""

import logging
import math

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models import Book, User
from app.schemas.books import BookCreate, BookOut, Location, NearbyBook

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DISTANCE = 3.0
MAX_SEARCH_DISTANCE = 1000.0


def distance(a: Location, b: Location) -> float:
    """Euclidean distance between two grid points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def _to_out(book: Book) -> BookOut:
    return BookOut(
        id=book.id,
        owner_id=book.owner_id,
        title=book.title,
        author=book.author,
        description=book.description or "",
        published_on=book.published_on,
        special_features=list(book.special_features or []),
        location=Location(x=book.location_x, y=book.location_y),
        created_at=book.created_at,
    )


def create_book(db: Session, owner_id: int, data: BookCreate) -> BookOut:
    book = Book(
        owner_id=owner_id,
        title=data.title,
        author=data.author,
        description=data.description,
        published_on=data.published_on,
        special_features=data.special_features,
        location_x=data.location.x,
        location_y=data.location.y,
    )
    db.add(book)
    db.commit()
    db.refresh(book)
    logger.info("Book listed", extra={"book_id": book.id, "owner_id": owner_id})
    return _to_out(book)


def list_books_for_owner(db: Session, owner_id: int) -> list[BookOut]:
    books = db.query(Book).filter(Book.owner_id == owner_id).order_by(Book.id).all()
    return [_to_out(b) for b in books]


def delete_book(db: Session, owner_id: int, book_id: int) -> int:
    """Remove one of the owner's listings. Other members' books read as not found."""
    deleted = (
        db.query(Book)
        .filter(Book.id == book_id, Book.owner_id == owner_id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise NotFoundError("Book not found")
    db.commit()
    return book_id


def find_nearby(
    db: Session,
    origin: Location,
    max_distance: float = DEFAULT_SEARCH_DISTANCE,
) -> list[NearbyBook]:
    """
    Books within max_distance of origin, closest first.

    The bounding box is applied in SQL; the exact circle check and the sort
    happen here.
    """
    if not math.isfinite(max_distance) or max_distance < 0 or max_distance > MAX_SEARCH_DISTANCE:
        raise ValidationError(f"max_distance must be between 0 and {MAX_SEARCH_DISTANCE}")
    if not (math.isfinite(origin.x) and math.isfinite(origin.y)):
        raise ValidationError("x and y must be finite numbers")

    query = (
        db.query(Book, User.name)
        .join(User, Book.owner_id == User.id)
        .filter(
            Book.location_x >= origin.x - max_distance,
            Book.location_x <= origin.x + max_distance,
            Book.location_y >= origin.y - max_distance,
            Book.location_y <= origin.y + max_distance,
        )
    )

    results: list[NearbyBook] = []
    for book, lender_name in query.all():
        out = _to_out(book)
        d = distance(origin, out.location)
        if d <= max_distance:
            results.append(NearbyBook(**out.model_dump(), lender_name=lender_name, distance=d))
    results.sort(key=lambda b: (b.distance, b.id))
    return results
