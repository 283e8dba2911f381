"""ORM model for books a member lists for lending."""

from sqlalchemy import JSON, Column, Date, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class Book(Base):
    """
    One lendable copy owned by a member, pinned to the lender's location.

    Location is a plain (x, y) pair on the app's map grid, not lat/long.
    """

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(
        Integer,
        ForeignKey("auth.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    published_on = Column(Date, nullable=True)
    special_features = Column(JSON, nullable=False, default=list)
    location_x = Column(Float, nullable=False)
    location_y = Column(Float, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    owner = relationship("User", back_populates="books")
