"""
Entity <-> DTO mapping.

Each registered pair maps both ways: entity -> DTO goes through pydantic's
``from_attributes`` validation, DTO -> entity copies the DTO fields that are
mapped columns of the entity.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar, overload

from pydantic import BaseModel
from sqlalchemy import inspect

from app.models.author import Author
from app.models.base import Base
from app.models.book import Book
from app.models.user import User
from app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from app.schemas.book import BookCreate, BookRead, BookUpdate
from app.schemas.user import UserRead

SchemaT = TypeVar("SchemaT", bound=BaseModel)
ModelT = TypeVar("ModelT", bound=Base)

MAPS: frozenset[tuple[type[Base], type[BaseModel]]] = frozenset(
    {
        (Author, AuthorRead),
        (Author, AuthorCreate),
        (Author, AuthorUpdate),
        (Book, BookRead),
        (Book, BookCreate),
        (Book, BookUpdate),
        (User, UserRead),
    }
)


class MappingError(TypeError):
    """Raised when no map is registered between two types."""


def _check_registered(model: type[Base], schema: type[BaseModel]) -> None:
    if (model, schema) not in MAPS:
        raise MappingError(f"No map registered between {model.__name__} and {schema.__name__}")


@overload
def map_to(source: Base, target: type[SchemaT]) -> SchemaT: ...
@overload
def map_to(source: BaseModel, target: type[ModelT]) -> ModelT: ...
def map_to(source: Base | BaseModel, target: type[BaseModel] | type[Base]) -> BaseModel | Base:
    """Map an entity to a DTO type, or a DTO to an entity type."""
    if isinstance(source, Base) and issubclass(target, BaseModel):
        _check_registered(type(source), target)
        return target.model_validate(source)

    if isinstance(source, BaseModel) and issubclass(target, Base):
        _check_registered(target, type(source))
        columns = {attr.key for attr in inspect(target).column_attrs}
        return target(**source.model_dump(include=columns))

    raise MappingError(f"Cannot map {type(source).__name__} to {target.__name__}")


def map_many(sources: Iterable[Base], target: type[SchemaT]) -> list[SchemaT]:
    """Map a sequence of entities to a list of DTOs."""
    return [map_to(source, target) for source in sources]
