# core/services/book_service.py

import logging
from typing import Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFound, InvalidInput
from core.identity import Identity
from core.lending.rules import check_is_owner
from core.sa.models import Book
from core.sa.repositories.book import BookRepository
from core.sa.repositories.pagination import Page
from core.utils.image import CoverStorage

logger = logging.getLogger(__name__)

class BookService:
    """Book registry: publishing books, reading them back and updating covers."""

    def __init__(self, session: Session, cover_storage: Optional[CoverStorage] = None):
        self.books = BookRepository(session)
        self.cover_storage = cover_storage or CoverStorage()

    def get_book(self, book_id: int) -> Book:
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFound(f"Book not found with id: {book_id}")
        return book

    def create_book(
        self,
        actor: Identity,
        title: str,
        author_name: str,
        isbn: str,
        synopsis: Optional[str] = None,
        shareable: bool = False
    ) -> int:
        for name, value in (("title", title), ("author_name", author_name), ("isbn", isbn)):
            if not value or not value.strip():
                raise InvalidInput(f"{name} can't be empty")

        book = self.books.create_book(
            owner_id=actor.id,
            title=title.strip(),
            author_name=author_name.strip(),
            isbn=isbn.strip(),
            synopsis=synopsis,
            shareable=shareable
        )
        logger.info(f"User {actor.id} published book {book.id}")
        return book.id

    def list_displayable(self, actor: Identity, page: int = 1, size: int = 10) -> Page[Book]:
        return self.books.find_displayable(actor.id, page, size)

    def list_owned(self, actor: Identity, page: int = 1, size: int = 10) -> Page[Book]:
        return self.books.find_by_owner(actor.id, page, size)

    def upload_cover(self, actor: Identity, book_id: int, image_data: bytes) -> int:
        book = self.get_book(book_id)
        check_is_owner(actor, book, "cover")

        book.book_cover = self.cover_storage.save_cover(actor.id, image_data)
        self.books.save(book)
        logger.info(f"User {actor.id} updated cover of book {book_id}")
        return book_id
