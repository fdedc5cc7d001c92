from typing import Optional
from sqlalchemy import select, desc
from sqlalchemy.orm import Session
from core.sa.models import Book, AuditInfo
from core.sa.repositories.pagination import Page, paginate

class BookRepository:
    """Repository for managing Book entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_book(
        self,
        owner_id: int,
        title: str,
        author_name: str,
        isbn: str,
        synopsis: Optional[str] = None,
        shareable: bool = False
    ) -> Book:
        """Create a new, non-archived book owned by ``owner_id``.

        Args:
            owner_id: ID of the owning user
            title: Book title
            author_name: Author name
            isbn: ISBN
            synopsis: Optional synopsis
            shareable: Whether other users may borrow the book

        Returns:
            The created Book object
        """
        book = Book(
            owner_id=owner_id,
            title=title,
            author_name=author_name,
            isbn=isbn,
            synopsis=synopsis,
            shareable=shareable,
            archived=False,
            audit=AuditInfo.now(owner_id),
        )
        self.session.add(book)
        self.session.commit()
        return book

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by its ID.

        Args:
            book_id: The ID of the book to retrieve

        Returns:
            The Book object if found, None otherwise
        """
        return self.session.get(Book, book_id)

    def save(self, book: Book) -> Book:
        self.session.add(book)
        self.session.commit()
        return book

    def find_displayable(self, user_id: int, page: int = 1, size: int = 10) -> Page[Book]:
        """Books another user may borrow: shareable, not archived, not owned by ``user_id``."""
        query = (
            select(Book)
            .where(
                Book.archived.is_(False),
                Book.shareable.is_(True),
                Book.owner_id != user_id
            )
            .order_by(desc(Book.created_at), desc(Book.id))
        )
        return paginate(self.session, query, page, size)

    def find_by_owner(self, owner_id: int, page: int = 1, size: int = 10) -> Page[Book]:
        query = (
            select(Book)
            .where(Book.owner_id == owner_id)
            .order_by(desc(Book.created_at), desc(Book.id))
        )
        return paginate(self.session, query, page, size)
