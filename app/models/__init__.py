"""SQLAlchemy ORM models."""

from app.models.admin import AdminUser
from app.models.base import Base
from app.models.book import Book
from app.models.user import User

__all__ = ["AdminUser", "Base", "Book", "User"]
