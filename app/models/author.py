from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base

if TYPE_CHECKING:
    from app.models.book import Book

#Author
class Author(Base):
    __tablename__: str = "authors"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)

    books: Mapped[list[Book]] = relationship(back_populates="author")
