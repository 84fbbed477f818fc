from typing import ClassVar, Generic, TypeVar
from collections.abc import Sequence
from sqlalchemy import Column, exists as sql_exists, inspect, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.interfaces import LoaderOption

from app.models.base import INT4_MAX, INT4_MIN, Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Storage access for one entity type.

    Writes stage a change and `save`; success means the commit applied at
    least one change. Storage errors are left to the caller.
    """

    model: ClassVar[type[Base]]

    @classmethod
    def _pk(cls) -> Column[int]:
        return inspect(cls.model).primary_key[0]

    @classmethod
    def _load_options(cls) -> Sequence[LoaderOption]:
        return ()

    @classmethod
    # List all entities
    def find_all(cls, db: Session) -> list[ModelT]:
        stmt = select(cls.model).options(*cls._load_options()).order_by(cls._pk())
        return list(db.scalars(stmt).all())

    @classmethod
    # Get an entity by ID
    def find_by_id(cls, db: Session, entity_id: int) -> ModelT | None:
        if not INT4_MIN <= entity_id <= INT4_MAX:
            return None
        return db.get(cls.model, entity_id, options=cls._load_options())

    @classmethod
    # Check if an entity exists
    def exists(cls, db: Session, entity_id: int) -> bool:
        # Ids outside the key column range cannot be stored
        if not INT4_MIN <= entity_id <= INT4_MAX:
            return False
        stmt = select(sql_exists().where(cls._pk() == entity_id))
        return bool(db.scalar(stmt))

    @classmethod
    # Create a new entity
    def create(cls, db: Session, entity: ModelT) -> bool:
        db.add(entity)
        return cls.save(db)

    @classmethod
    # Replace an existing entity
    def update(cls, db: Session, entity: ModelT) -> bool:
        entity_id = getattr(entity, cls._pk().key)
        if not cls.exists(db, entity_id):
            return cls.save(db)

        merged = db.merge(entity)
        # Unchanged values count as a successful update
        if not db.is_modified(merged):
            return True
        return cls.save(db)

    @classmethod
    # Delete an entity
    def delete(cls, db: Session, entity: ModelT) -> bool:
        db.delete(entity)
        return cls.save(db)

    @staticmethod
    # Commit staged changes
    def save(db: Session) -> bool:
        changes = (
            len(db.new)
            + len(db.deleted)
            + sum(1 for obj in db.dirty if db.is_modified(obj))
        )
        db.commit()
        return changes > 0
