"""Book listings for the current member and the nearby-lenders search."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.core.errors import AppError
from app.schemas.admin import MessageResponse
from app.schemas.auth import CurrentUser
from app.schemas.books import BookCreate, BookOut, Location, NearbyBook
from app.services import books as books_service
from app.services.books import DEFAULT_SEARCH_DISTANCE

router = APIRouter()


@router.post("", response_model=BookOut, status_code=status.HTTP_201_CREATED)
def create_book(
    body: BookCreate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> BookOut:
    """List a book for lending at the given location."""
    return books_service.create_book(db, user.id, body)


@router.get("/mine", response_model=list[BookOut])
def my_books(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[BookOut]:
    return books_service.list_books_for_owner(db, user.id)


@router.get("/nearby", response_model=list[NearbyBook])
def nearby_books(
    db: Annotated[Session, Depends(get_db)],
    x: Annotated[float, Query(description="Search origin x")],
    y: Annotated[float, Query(description="Search origin y")],
    max_distance: Annotated[float, Query()] = DEFAULT_SEARCH_DISTANCE,
) -> list[NearbyBook]:
    """Books from lenders within max_distance of (x, y), closest first."""
    try:
        return books_service.find_nearby(db, Location(x=x, y=y), max_distance)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(
    book_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Withdraw one of your own listings."""
    try:
        books_service.delete_book(db, user.id, book_id)
    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Book removed")
