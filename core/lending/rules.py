# core/lending/rules.py
"""Authorization rules for lending and feedback.

Every check is a pure function of the actor and the book: it returns
``None`` when the action is allowed and raises ``NotPermitted`` otherwise.
Checks run in a fixed order so the first violated rule decides the error.
"""

from typing import Protocol

from core.exceptions import NotPermitted
from core.identity import Identity


class LendableBook(Protocol):
    archived: bool
    shareable: bool
    owner_id: int


def _is_available(book: LendableBook) -> bool:
    return not book.archived and book.shareable


def _is_owner(actor: Identity, book: LendableBook) -> bool:
    return actor.id == book.owner_id


def check_can_borrow(actor: Identity, book: LendableBook) -> None:
    if not _is_available(book):
        raise NotPermitted("You can't borrow this book since it's archived or not shareable")
    if _is_owner(actor, book):
        raise NotPermitted("You can't borrow your own book")


def check_can_return(actor: Identity, book: LendableBook) -> None:
    # Same gate as borrowing: a loan on a book archived afterwards can't be returned here.
    if not _is_available(book):
        raise NotPermitted("You can't borrow or return this book since it's archived or not shareable")
    if _is_owner(actor, book):
        raise NotPermitted("You can't borrow or return your own book")


def check_can_approve(actor: Identity, book: LendableBook) -> None:
    if not _is_available(book):
        raise NotPermitted("You can't approve this book since it's archived or not shareable")
    if not _is_owner(actor, book):
        raise NotPermitted("You can only approve returns of your own books")


def check_can_feedback(actor: Identity, book: LendableBook) -> None:
    if not _is_available(book):
        raise NotPermitted("You can't add feedback on this book since it's archived or not shareable")
    if _is_owner(actor, book):
        raise NotPermitted("You can't add feedback on your own book")


def check_is_owner(actor: Identity, book: LendableBook, action: str) -> None:
    """Owner-only book mutations (flags, cover)."""
    if not _is_owner(actor, book):
        raise NotPermitted(f"You can't update the {action} of another user's book")
