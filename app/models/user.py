"""ORM model for lending-app members (table ``auth``)."""

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String, text
from sqlalchemy.orm import relationship

from app.models.base import Base


class User(Base):
    """
    Registered member. Created on register; rating is set by admins.

    Deleting a user removes their book listings (FK ON DELETE CASCADE).
    """

    __tablename__ = "auth"
    __table_args__ = (CheckConstraint("rating >= 0", name="ck_auth_rating_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=False)
    rating = Column(Numeric(10, 2), nullable=False, default=0, server_default=text("0"))

    books = relationship("Book", back_populates="owner", passive_deletes=True)
