from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.repos.author_repo import AuthorRepository
from app.models.author import Author
from app.models.user import ADMINISTRATOR, CUSTOMER
from app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from app.mappings import map_many, map_to
from app.core.errors import describe_exception, internal_error
from app.core.logging import get_location, get_logger
from app.core.security import require_roles
from typing import Annotated
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
)
router = APIRouter(prefix="/authors", tags=["authors"])

readers = require_roles(ADMINISTRATOR, CUSTOMER)
admins = require_roles(ADMINISTRATOR)


@router.get("", response_model=list[AuthorRead], dependencies=[Depends(readers)])
def get_authors(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Get all authors."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting call", location)
        authors = AuthorRepository.find_all(db)
        response = map_many(authors, AuthorRead)
        logger.info("%s: Successful", location)
        return response
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.get("/{author_id}", response_model=AuthorRead, dependencies=[Depends(readers)])
def get_author(
    author_id: int,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Get an author by id."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting to get an author by Id:%s", location, author_id)
        author = AuthorRepository.find_by_id(db, author_id)
        if author is None:
            logger.warning("%s: Author with Id:%s was not found", location, author_id)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Author not found")
        response = map_to(author, AuthorRead)
        logger.info("%s: Successful", location)
        return response
    except HTTPException:
        raise
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.post(
    "",
    response_model=AuthorRead,
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(admins)],
)
def create_author(
    data: AuthorCreate,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Create an author."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting to create author", location)
        author = map_to(data, Author)
        if not AuthorRepository.create(db, author):
            return internal_error(logger, f"{location}: Error creating author")

        logger.info("%s: Author with Id:%s created successfully", location, author.id)
        response.headers["Location"] = str(request.url_for("get_author", author_id=author.id))
        return map_to(author, AuthorRead)
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.put(
    "/{author_id}",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(admins)],
)
def update_author(
    author_id: int,
    data: AuthorUpdate,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Replace an author; the body id must match the path id."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting to update author", location)
        if author_id < 1 or author_id != data.id:
            logger.warning("%s: Author id is invalid or does not match the body", location)
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Author id mismatch")
        if not AuthorRepository.exists(db, author_id):
            logger.warning("%s: Author with Id:%s was not found", location, author_id)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Author not found")

        author = map_to(data, Author)
        if not AuthorRepository.update(db, author):
            return internal_error(logger, f"{location}: Error updating author data")
        logger.info("%s: Author with Id:%s updated successfully", location, author_id)
        return Response(status_code=HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.delete(
    "/{author_id}",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(admins)],
)
def delete_author(
    author_id: int,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete an author."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting call to delete author", location)
        if author_id < 1:
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Invalid author id")
        if not AuthorRepository.exists(db, author_id):
            logger.warning("%s: Author with Id:%s was not found", location, author_id)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Author not found")

        author = AuthorRepository.find_by_id(db, author_id)
        if author is None or not AuthorRepository.delete(db, author):
            return internal_error(logger, f"{location}: Error deleting author")
        logger.info("%s: Successfully deleted author", location)
        return Response(status_code=HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")
