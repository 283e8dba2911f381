"""Pydantic schemas for book listings and the nearby-lenders search."""

import math
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


class Location(BaseModel):
    """Point on the app's map grid."""

    x: float
    y: float


class BookCreate(BaseModel):
    """A book the current member offers for lending."""

    title: str = Field(..., min_length=1, max_length=255)
    author: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)
    published_on: date | None = Field(default=None, description="Date of manufacture/publication")
    special_features: list[str] = Field(default_factory=list, max_length=20)
    location: Location

    @field_validator("title", "author")
    @classmethod
    def strip_non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be non-empty")
        return v

    @field_validator("special_features")
    @classmethod
    def drop_blank_features(cls, v: list[str]) -> list[str]:
        return [f.strip() for f in v if f and f.strip()]

    @field_validator("location")
    @classmethod
    def finite_location(cls, v: Location) -> Location:
        if not (math.isfinite(v.x) and math.isfinite(v.y)):
            raise ValueError("x and y must be finite numbers")
        return v


class BookOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    owner_id: int
    title: str
    author: str
    description: str
    published_on: date | None
    special_features: list[str]
    location: Location
    created_at: datetime | None = None


class NearbyBook(BookOut):
    """Listing with the lender's name and Euclidean distance from the search point."""

    lender_name: str
    distance: float
