from typing import Optional
from sqlalchemy import select, update, desc
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from core.sa.models import Book, BookTransaction, AuditInfo
from core.sa.repositories.pagination import Page, paginate

class TransactionRepository:
    """Repository for the borrow/return ledger.

    State changes are conditional updates guarded by the expected current
    state, so two concurrent requests can't both apply the same transition.
    """

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_transaction(self, book_id: int, user_id: int) -> BookTransaction:
        """Open a new loan of ``book_id`` to ``user_id``.

        Args:
            book_id: ID of the borrowed book
            user_id: ID of the borrower

        Returns:
            The created BookTransaction

        Raises:
            IntegrityError: If the borrower already has an open loan of the book
        """
        transaction = BookTransaction(
            book_id=book_id,
            user_id=user_id,
            returned=False,
            returned_approved=False,
            audit=AuditInfo.now(user_id),
        )
        self.session.add(transaction)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        return transaction

    def find_unresolved(self, book_id: int, user_id: int) -> Optional[BookTransaction]:
        """Get the open loan (neither returned nor approved) of a book by a borrower.

        Args:
            book_id: ID of the book
            user_id: ID of the borrower

        Returns:
            The BookTransaction if the borrower has the book, None otherwise
        """
        return self.session.scalars(
            select(BookTransaction).where(
                BookTransaction.book_id == book_id,
                BookTransaction.user_id == user_id,
                BookTransaction.returned.is_(False),
                BookTransaction.returned_approved.is_(False)
            )
        ).first()

    def find_returned_unapproved(self, book_id: int, owner_id: int) -> Optional[BookTransaction]:
        """Get a loan of an owner's book that was returned but not yet approved.

        Args:
            book_id: ID of the book
            owner_id: ID of the book's owner

        Returns:
            The oldest matching BookTransaction, None if nothing awaits approval
        """
        return self.session.scalars(
            select(BookTransaction)
            .join(Book, BookTransaction.book_id == Book.id)
            .where(
                BookTransaction.book_id == book_id,
                Book.owner_id == owner_id,
                BookTransaction.returned.is_(True),
                BookTransaction.returned_approved.is_(False)
            )
            .order_by(BookTransaction.created_at, BookTransaction.id)
        ).first()

    def mark_returned(self, transaction_id: int) -> bool:
        """Flip ``returned`` on an open loan. Returns False if the loan was no longer open."""
        result = self.session.execute(
            update(BookTransaction)
            .where(
                BookTransaction.id == transaction_id,
                BookTransaction.returned.is_(False),
                BookTransaction.returned_approved.is_(False)
            )
            .values(returned=True)
            .execution_options(synchronize_session=False)
        )
        updated = result.rowcount == 1
        self.session.commit()
        return updated

    def mark_return_approved(self, transaction_id: int) -> bool:
        """Flip ``returned_approved`` on a returned loan. Returns False if it was already approved."""
        result = self.session.execute(
            update(BookTransaction)
            .where(
                BookTransaction.id == transaction_id,
                BookTransaction.returned.is_(True),
                BookTransaction.returned_approved.is_(False)
            )
            .values(returned_approved=True)
            .execution_options(synchronize_session=False)
        )
        updated = result.rowcount == 1
        self.session.commit()
        return updated

    def find_all_borrowed_by_user(self, user_id: int, page: int = 1, size: int = 10) -> Page[BookTransaction]:
        """Every loan taken by ``user_id``, open or closed, newest first."""
        query = (
            select(BookTransaction)
            .where(BookTransaction.user_id == user_id)
            .order_by(desc(BookTransaction.created_at), desc(BookTransaction.id))
        )
        return paginate(self.session, query, page, size)

    def find_all_for_owner(self, owner_id: int, page: int = 1, size: int = 10) -> Page[BookTransaction]:
        """Every loan of a book owned by ``owner_id``, newest first."""
        query = (
            select(BookTransaction)
            .join(Book, BookTransaction.book_id == Book.id)
            .where(Book.owner_id == owner_id)
            .order_by(desc(BookTransaction.created_at), desc(BookTransaction.id))
        )
        return paginate(self.session, query, page, size)
