"""ORM model for console administrators (table ``admin``)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class AdminUser(Base):
    """Administrator account. Read-only to the API; seeded with the create_admin script."""

    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=False)
