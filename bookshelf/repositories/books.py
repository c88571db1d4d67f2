"""Book data access scoped to a single owner."""

import uuid
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from bookshelf.core.exceptions import NotFound
from bookshelf.models import Book


def _parse_book_id(book_id) -> Optional[uuid.UUID]:
    if isinstance(book_id, uuid.UUID):
        return book_id
    try:
        return uuid.UUID(str(book_id))
    except ValueError:
        return None


class BookRepository:
    """
    Every query filters on ``id`` and ``user_id`` together, so a book owned
    by someone else is indistinguishable from a missing one.
    """

    def __init__(self, db: Session, owner_id: uuid.UUID):
        self.db = db
        self.owner_id = owner_id

    def _owned(self, book_id: uuid.UUID):
        return (Book.id == book_id, Book.user_id == self.owner_id)

    def create(self, *, title: str, author: str, genrer: str) -> Book:
        book = Book(
            id=uuid.uuid4(),
            user_id=self.owner_id,
            title=title,
            author=author,
            genrer=genrer
        )
        self.db.add(book)
        self.db.commit()
        return book

    def list_by_owner(self) -> List[Book]:
        stmt = (
            select(Book)
            .where(Book.user_id == self.owner_id)
            .order_by(Book.created_at, Book.id)
        )
        return list(self.db.scalars(stmt))

    def get_by_id(self, book_id) -> Book:
        parsed = _parse_book_id(book_id)
        if parsed is None:
            raise NotFound("Book not found")

        book = self.db.scalar(select(Book).where(*self._owned(parsed)))
        if book is None:
            raise NotFound("Book not found")
        return book

    def update(self, book_id, *, title: str, author: str, genrer: str) -> Book:
        parsed = _parse_book_id(book_id)
        if parsed is None:
            raise NotFound("Book not found")

        result = self.db.execute(
            update(Book)
            .where(*self._owned(parsed))
            .values(title=title, author=author, genrer=genrer)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFound("Book not found")

        # read back inside the same transaction, the row is still locked
        book = self.db.scalar(
            select(Book)
            .where(*self._owned(parsed))
            .execution_options(populate_existing=True)
        )
        self.db.commit()
        return book

    def delete(self, book_id) -> None:
        parsed = _parse_book_id(book_id)
        if parsed is None:
            raise NotFound("Book not found")

        result = self.db.execute(
            delete(Book)
            .where(*self._owned(parsed))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFound("Book not found")

        self.db.commit()
