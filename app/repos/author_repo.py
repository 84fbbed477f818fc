from collections.abc import Sequence
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.author import Author
from app.repos.base import Repository


class AuthorRepository(Repository[Author]):
    model = Author

    @classmethod
    def _load_options(cls) -> Sequence[LoaderOption]:
        return (selectinload(Author.books),)
