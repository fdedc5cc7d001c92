# api/mapper.py
import base64
from typing import Callable, Optional, TypeVar

from core.sa.models import Book, BookTransaction
from core.sa.repositories.pagination import Page
from core.utils.image import read_cover
from api.schemas.book import Book as BookSchema, BorrowedBook
from api.schemas.common import PaginatedResponse

T = TypeVar("T")


def encode_cover(file_path: Optional[str]) -> Optional[str]:
    """Base64 content of a stored cover."""
    data = read_cover(file_path)
    return base64.b64encode(data).decode("ascii") if data is not None else None


def to_book_schema(book: Book) -> BookSchema:
    return BookSchema(
        id=book.id,
        title=book.title,
        author_name=book.author_name,
        isbn=book.isbn,
        synopsis=book.synopsis,
        owner=book.owner.full_name,
        rate=book.rate,
        archived=book.archived,
        shareable=book.shareable,
        cover=encode_cover(book.book_cover)
    )


def to_borrowed_book(transaction: BookTransaction) -> BorrowedBook:
    book = transaction.book
    return BorrowedBook(
        transaction_id=transaction.id,
        id=book.id,
        title=book.title,
        author_name=book.author_name,
        isbn=book.isbn,
        rate=book.rate,
        returned=transaction.returned,
        returned_approved=transaction.returned_approved
    )


def to_paginated(page: Page, convert: Callable[..., T]) -> PaginatedResponse:
    return PaginatedResponse(
        page=page.number,
        size=page.size,
        total_pages=page.total_pages,
        total_items=page.total_elements,
        first=page.first,
        last=page.last,
        data=[convert(item) for item in page.items]
    )
