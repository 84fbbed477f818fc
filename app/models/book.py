from __future__ import annotations
from typing import TYPE_CHECKING
from decimal import Decimal
from sqlalchemy import ForeignKey, Numeric, Integer, CheckConstraint, Text, Constraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base

if TYPE_CHECKING:
    from app.models.author import Author

#Book
class Book(Base):
    __tablename__: str = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    isbn: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    author_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("authors.id"),
        nullable=True,
    )

    author: Mapped[Author | None] = relationship(back_populates="books")

    __table_args__: tuple[Constraint, ...] = (
            CheckConstraint("price >= 0", name="books_price_nonneg"),
    )
