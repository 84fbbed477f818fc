from __future__ import annotations
from pydantic import BaseModel, field_validator, ConfigDict
from typing import ClassVar


# Author base schema
class AuthorBase(BaseModel):
    first_name: str
    last_name: str

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

# Author create schema
class AuthorCreate(AuthorBase):
    pass

# Author update schema
class AuthorUpdate(AuthorBase):
    id: int

# Book as listed under its author
class AuthorBookRead(BaseModel):
    id: int
    title: str
    year: int | None = None
    isbn: str

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)

# Author read schema
class AuthorRead(AuthorBase):
    id: int
    books: list[AuthorBookRead] = []

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)
