from .base import Base
from .author import Author
from .book import Book
from .user import Role, User

__all__ = ["Base", "Author", "Book", "Role", "User"]
