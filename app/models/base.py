"""SQLAlchemy declarative Base shared by the auth, admin and books tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
