from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from bookshelf.core.logger import logger
from bookshelf.core.session import SessionContext
from bookshelf.db.session import get_db
from bookshelf.dependencies.auth import get_current_session
from bookshelf.repositories import BookRepository
from bookshelf.schemas.books import BookEnvelope, BookListEnvelope, BookPayload

# gate every route; the user id comes from the session only
router = APIRouter(prefix="/books", tags=["Books"])


def get_book_repository(
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db)
) -> BookRepository:
    return BookRepository(db, session.user_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BookEnvelope)
def book_create(
    payload: BookPayload,
    books: BookRepository = Depends(get_book_repository)
):
    book = books.create(
        title=payload.title,
        author=payload.author,
        genrer=payload.genrer
    )
    logger.info(f"BOOK CREATED | user_id={books.owner_id} | book_id={book.id}")
    return {"book": book}


@router.get("", response_model=BookListEnvelope)
def book_list(books: BookRepository = Depends(get_book_repository)):
    return {"books": books.list_by_owner()}


@router.get("/{book_id}", response_model=BookEnvelope)
def book_get(book_id: str, books: BookRepository = Depends(get_book_repository)):
    return {"book": books.get_by_id(book_id)}


@router.put("/{book_id}", response_model=BookEnvelope)
def book_update(
    book_id: str,
    payload: BookPayload,
    books: BookRepository = Depends(get_book_repository)
):
    book = books.update(
        book_id,
        title=payload.title,
        author=payload.author,
        genrer=payload.genrer
    )
    logger.info(f"BOOK UPDATED | user_id={books.owner_id} | book_id={book.id}")
    return {"book": book}


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def book_delete(book_id: str, books: BookRepository = Depends(get_book_repository)):
    books.delete(book_id)
    logger.info(f"BOOK DELETED | user_id={books.owner_id} | book_id={book_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
