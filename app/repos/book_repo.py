from collections.abc import Sequence
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.book import Book
from app.repos.base import Repository


class BookRepository(Repository[Book]):
    model = Book

    @classmethod
    def _load_options(cls) -> Sequence[LoaderOption]:
        return (joinedload(Book.author),)
