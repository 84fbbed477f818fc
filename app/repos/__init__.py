from .base import Repository
from .author_repo import AuthorRepository
from .book_repo import BookRepository

__all__ = ["Repository", "AuthorRepository", "BookRepository"]
