from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.repos.book_repo import BookRepository
from app.models.book import Book
from app.schemas.book import BookCreate, BookRead, BookUpdate
from app.mappings import map_many, map_to
from app.core.errors import describe_exception, internal_error
from app.core.logging import get_location, get_logger
from typing import Annotated
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
)
router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[BookRead])
def get_books(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Get all books, each with its author."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting call", location)
        books = BookRepository.find_all(db)
        response = map_many(books, BookRead)
        logger.info("%s: Successful", location)
        return response
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.get("/{book_id}", response_model=BookRead)
def get_book(
    book_id: int,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Get a book by id."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting to get a book by Id:%s", location, book_id)
        book = BookRepository.find_by_id(db, book_id)
        if book is None:
            logger.warning("%s: Book with Id:%s was not found", location, book_id)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Book not found")
        response = map_to(book, BookRead)
        logger.info("%s: Successful", location)
        return response
    except HTTPException:
        raise
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.post("", response_model=BookRead, status_code=HTTP_201_CREATED)
def create_book(
    data: BookCreate,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a book."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting to create book", location)
        book = map_to(data, Book)
        if not BookRepository.create(db, book):
            return internal_error(logger, f"{location}: Error creating book")

        logger.info("%s: Book with Id:%s created successfully", location, book.id)
        response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
        return map_to(book, BookRead)
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.put("/{book_id}", status_code=HTTP_204_NO_CONTENT, response_class=Response)
def update_book(
    book_id: int,
    data: BookUpdate,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting to update book", location)
        if book_id < 1 or book_id != data.id:
            logger.warning("%s: Book id is invalid or does not match the body", location)
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Book id mismatch")
        if not BookRepository.exists(db, book_id):
            logger.warning("%s: Book with Id:%s was not found", location, book_id)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Book not found")

        book = map_to(data, Book)
        if not BookRepository.update(db, book):
            return internal_error(logger, f"{location}: Error updating book data")
        logger.info("%s: Book with Id:%s updated successfully", location, book_id)
        return Response(status_code=HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")


@router.delete("/{book_id}", status_code=HTTP_204_NO_CONTENT, response_class=Response)
def delete_book(
    book_id: int,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a book."""
    location = get_location(request)
    logger = get_logger(__name__, request)
    try:
        logger.info("%s: Attempting call to delete book", location)
        if book_id < 1:
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Invalid book id")
        if not BookRepository.exists(db, book_id):
            logger.warning("%s: Book with Id:%s was not found", location, book_id)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Book not found")

        book = BookRepository.find_by_id(db, book_id)
        if book is None or not BookRepository.delete(db, book):
            return internal_error(logger, f"{location}: Error deleting book")
        logger.info("%s: Successfully deleted book", location)
        return Response(status_code=HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        return internal_error(logger, f"{location}: {describe_exception(e)}")
