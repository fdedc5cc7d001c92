# core/services/lending_service.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import NotFound, NotPermitted, AlreadyBorrowed
from core.identity import Identity
from core.lending.rules import (
    check_can_borrow, check_can_return, check_can_approve, check_is_owner
)
from core.sa.models import Book, BookTransaction
from core.sa.repositories.book import BookRepository
from core.sa.repositories.pagination import Page
from core.sa.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)

class LendingService:
    """Borrow, return and approve-return workflow between a borrower and a book owner.

    A loan moves BORROWED -> RETURN_REQUESTED -> CLOSED. A borrower with no
    open loan of a book is in the AVAILABLE state for it. Every check runs
    before any write, so a failed call leaves the store untouched.
    """

    def __init__(self, session: Session):
        self.books = BookRepository(session)
        self.transactions = TransactionRepository(session)

    def _get_book(self, book_id: int) -> Book:
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFound(f"Book not found with id: {book_id}")
        return book

    def borrow(self, actor: Identity, book_id: int) -> int:
        """Open a loan of ``book_id`` to ``actor``.

        Returns:
            ID of the new transaction

        Raises:
            NotFound: If the book does not exist
            NotPermitted: If the book is archived, not shareable or owned by the actor
            AlreadyBorrowed: If the actor already has an open loan of the book
        """
        book = self._get_book(book_id)
        check_can_borrow(actor, book)

        if self.transactions.find_unresolved(book_id, actor.id) is not None:
            raise AlreadyBorrowed("The requested book is already borrowed")

        try:
            transaction = self.transactions.create_transaction(book_id, actor.id)
        except IntegrityError:
            # Lost the race against a concurrent borrow of the same book
            logger.warning(f"Concurrent borrow of book {book_id} by user {actor.id} rejected")
            raise AlreadyBorrowed("The requested book is already borrowed")

        logger.info(f"User {actor.id} borrowed book {book_id} (transaction {transaction.id})")
        return transaction.id

    def return_book(self, actor: Identity, book_id: int) -> int:
        """Mark the actor's open loan of ``book_id`` as returned.

        Raises:
            NotFound: If the book does not exist
            NotPermitted: If the book is not lendable, owned by the actor,
                or the actor has nothing to return
        """
        book = self._get_book(book_id)
        check_can_return(actor, book)

        transaction = self.transactions.find_unresolved(book_id, actor.id)
        if transaction is None:
            raise NotPermitted("You can't return a book that you didn't borrow")

        if not self.transactions.mark_returned(transaction.id):
            logger.warning(f"Transaction {transaction.id} was returned concurrently")
            raise NotPermitted("You can't return a book that you didn't borrow")

        logger.info(f"User {actor.id} returned book {book_id} (transaction {transaction.id})")
        return transaction.id

    def approve_return(self, actor: Identity, book_id: int) -> int:
        """Approve a returned loan of a book the actor owns.

        Raises:
            NotFound: If the book does not exist
            NotPermitted: If the book is not lendable, the actor is not the owner,
                or no loan of the book is waiting for approval
        """
        book = self._get_book(book_id)
        check_can_approve(actor, book)

        transaction = self.transactions.find_returned_unapproved(book_id, actor.id)
        if transaction is None:
            raise NotPermitted("The book is not returned yet to be approved")

        if not self.transactions.mark_return_approved(transaction.id):
            logger.warning(f"Transaction {transaction.id} was approved concurrently")
            raise NotPermitted("The book is not returned yet to be approved")

        logger.info(f"User {actor.id} approved return of book {book_id} (transaction {transaction.id})")
        return transaction.id

    def toggle_shareable(self, actor: Identity, book_id: int) -> int:
        book = self._get_book(book_id)
        check_is_owner(actor, book, "shareable status")

        book.shareable = not book.shareable
        self.books.save(book)
        logger.info(f"User {actor.id} set book {book_id} shareable={book.shareable}")
        return book_id

    def toggle_archived(self, actor: Identity, book_id: int) -> int:
        # Open loans are left alone; archiving only blocks new ones.
        book = self._get_book(book_id)
        check_is_owner(actor, book, "archived status")

        book.archived = not book.archived
        self.books.save(book)
        logger.info(f"User {actor.id} set book {book_id} archived={book.archived}")
        return book_id

    def list_borrowed(self, actor: Identity, page: int = 1, size: int = 10) -> Page[BookTransaction]:
        return self.transactions.find_all_borrowed_by_user(actor.id, page, size)

    def list_lent(self, actor: Identity, page: int = 1, size: int = 10) -> Page[BookTransaction]:
        return self.transactions.find_all_for_owner(actor.id, page, size)
