from __future__ import annotations
from pydantic import BaseModel, Field, PlainSerializer, field_validator, ConfigDict
from typing import Annotated, ClassVar
from decimal import Decimal
from app.models.base import INT4_MAX, INT4_MIN

# Prices match the Numeric(10, 2) column and are written as JSON numbers
Price = Annotated[
    Decimal,
    Field(max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Book base schema
class BookBase(BaseModel):
    title: str
    year: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)
    isbn: str
    summary: str | None = Field(default=None, max_length=500)
    image: str | None = None
    price: Price | None = None
    author_id: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)

    @field_validator("title", "isbn", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("price")
    @classmethod
    def non_negative(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and v < 0:
            raise ValueError("price must be >= 0")
        return v

# Book create schema
class BookCreate(BookBase):
    pass

# Book update schema
class BookUpdate(BookBase):
    id: int

# Author as embedded in a book
class BookAuthorRead(BaseModel):
    id: int
    first_name: str
    last_name: str

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)

# Book read schema
class BookRead(BookBase):
    id: int
    author: BookAuthorRead | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)
