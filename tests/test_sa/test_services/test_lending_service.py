# tests/test_sa/test_services/test_lending_service.py

import pytest
from core.exceptions import NotFound, NotPermitted, AlreadyBorrowed
from core.sa.models import BookTransaction
from core.services import LendingService

@pytest.fixture
def lending(db_session):
    return LendingService(db_session)

def test_full_loan_cycle(lending, db_session, shared_book, owner_actor, borrower_actor):
    transaction_id = lending.borrow(borrower_actor, shared_book.id)
    transaction = db_session.get(BookTransaction, transaction_id)
    assert (transaction.returned, transaction.returned_approved) == (False, False)

    assert lending.return_book(borrower_actor, shared_book.id) == transaction_id
    db_session.refresh(transaction)
    assert (transaction.returned, transaction.returned_approved) == (True, False)

    assert lending.approve_return(owner_actor, shared_book.id) == transaction_id
    db_session.refresh(transaction)
    assert (transaction.returned, transaction.returned_approved) == (True, True)

    borrowed = lending.list_borrowed(borrower_actor)
    assert [t.id for t in borrowed.items] == [transaction_id]
    assert lending.transactions.find_unresolved(shared_book.id, borrower_actor.id) is None

def test_borrow_missing_book(lending, borrower_actor):
    with pytest.raises(NotFound):
        lending.borrow(borrower_actor, 999)

def test_borrow_own_book(lending, shared_book, owner_actor):
    with pytest.raises(NotPermitted, match="your own book"):
        lending.borrow(owner_actor, shared_book.id)

def test_borrow_twice(lending, shared_book, borrower_actor):
    lending.borrow(borrower_actor, shared_book.id)
    with pytest.raises(AlreadyBorrowed):
        lending.borrow(borrower_actor, shared_book.id)

def test_borrow_again_after_closed_loan(lending, shared_book, owner_actor, borrower_actor):
    first = lending.borrow(borrower_actor, shared_book.id)
    lending.return_book(borrower_actor, shared_book.id)
    lending.approve_return(owner_actor, shared_book.id)

    second = lending.borrow(borrower_actor, shared_book.id)
    assert second != first

def test_two_borrowers_may_hold_same_book(lending, shared_book, borrower_actor, other_actor):
    assert lending.borrow(borrower_actor, shared_book.id) != lending.borrow(other_actor, shared_book.id)

def test_concurrent_borrow_surfaces_as_already_borrowed(lending, shared_book, borrower_actor, monkeypatch):
    """A borrow that passed the existence check still loses to the unique index."""
    lending.borrow(borrower_actor, shared_book.id)
    monkeypatch.setattr(lending.transactions, "find_unresolved", lambda book_id, user_id: None)
    with pytest.raises(AlreadyBorrowed):
        lending.borrow(borrower_actor, shared_book.id)

@pytest.mark.parametrize("book_fixture", ["private_book", "archived_book"])
def test_unavailable_book_blocks_every_transition(request, lending, book_fixture, owner_actor, borrower_actor):
    book = request.getfixturevalue(book_fixture)
    with pytest.raises(NotPermitted):
        lending.borrow(borrower_actor, book.id)
    with pytest.raises(NotPermitted):
        lending.borrow(owner_actor, book.id)
    with pytest.raises(NotPermitted):
        lending.return_book(borrower_actor, book.id)
    with pytest.raises(NotPermitted):
        lending.approve_return(owner_actor, book.id)

def test_failed_borrow_writes_nothing(lending, db_session, private_book, borrower_actor):
    with pytest.raises(NotPermitted):
        lending.borrow(borrower_actor, private_book.id)
    assert db_session.query(BookTransaction).count() == 0

def test_return_without_loan(lending, shared_book, borrower_actor):
    with pytest.raises(NotPermitted, match="didn't borrow"):
        lending.return_book(borrower_actor, shared_book.id)

def test_return_twice(lending, shared_book, borrower_actor):
    lending.borrow(borrower_actor, shared_book.id)
    lending.return_book(borrower_actor, shared_book.id)
    with pytest.raises(NotPermitted):
        lending.return_book(borrower_actor, shared_book.id)

def test_owner_cannot_return(lending, shared_book, owner_actor):
    with pytest.raises(NotPermitted, match="your own book"):
        lending.return_book(owner_actor, shared_book.id)

def test_return_missing_book(lending, borrower_actor):
    with pytest.raises(NotFound):
        lending.return_book(borrower_actor, 999)

def test_approve_before_return(lending, shared_book, owner_actor, borrower_actor):
    lending.borrow(borrower_actor, shared_book.id)
    with pytest.raises(NotPermitted, match="not returned yet"):
        lending.approve_return(owner_actor, shared_book.id)

def test_approve_by_non_owner(lending, shared_book, borrower_actor):
    lending.borrow(borrower_actor, shared_book.id)
    lending.return_book(borrower_actor, shared_book.id)
    with pytest.raises(NotPermitted, match="your own books"):
        lending.approve_return(borrower_actor, shared_book.id)

def test_approve_twice(lending, shared_book, owner_actor, borrower_actor):
    lending.borrow(borrower_actor, shared_book.id)
    lending.return_book(borrower_actor, shared_book.id)
    lending.approve_return(owner_actor, shared_book.id)
    with pytest.raises(NotPermitted):
        lending.approve_return(owner_actor, shared_book.id)

def test_approve_missing_book(lending, owner_actor):
    with pytest.raises(NotFound):
        lending.approve_return(owner_actor, 999)

def test_lost_approval_race(lending, shared_book, owner_actor, borrower_actor, monkeypatch):
    lending.borrow(borrower_actor, shared_book.id)
    lending.return_book(borrower_actor, shared_book.id)
    monkeypatch.setattr(lending.transactions, "mark_return_approved", lambda transaction_id: False)
    with pytest.raises(NotPermitted):
        lending.approve_return(owner_actor, shared_book.id)

def test_toggle_shareable(lending, db_session, shared_book, owner_actor):
    assert lending.toggle_shareable(owner_actor, shared_book.id) == shared_book.id
    db_session.refresh(shared_book)
    assert shared_book.shareable is False
    lending.toggle_shareable(owner_actor, shared_book.id)
    db_session.refresh(shared_book)
    assert shared_book.shareable is True

def test_toggle_archived(lending, db_session, shared_book, owner_actor):
    lending.toggle_archived(owner_actor, shared_book.id)
    db_session.refresh(shared_book)
    assert shared_book.archived is True

def test_toggles_are_owner_only(lending, shared_book, borrower_actor):
    with pytest.raises(NotPermitted):
        lending.toggle_shareable(borrower_actor, shared_book.id)
    with pytest.raises(NotPermitted):
        lending.toggle_archived(borrower_actor, shared_book.id)

def test_toggles_missing_book(lending, owner_actor):
    with pytest.raises(NotFound):
        lending.toggle_shareable(owner_actor, 999)
    with pytest.raises(NotFound):
        lending.toggle_archived(owner_actor, 999)

def test_archiving_leaves_open_loan_stuck(lending, shared_book, owner_actor, borrower_actor):
    """Archiving blocks new loans and also the return of the open one."""
    transaction_id = lending.borrow(borrower_actor, shared_book.id)
    lending.toggle_archived(owner_actor, shared_book.id)

    with pytest.raises(NotPermitted):
        lending.return_book(borrower_actor, shared_book.id)

    lending.toggle_archived(owner_actor, shared_book.id)
    assert lending.return_book(borrower_actor, shared_book.id) == transaction_id

def test_list_lent(lending, shared_book, owner_actor, borrower_actor, other_actor):
    first = lending.borrow(borrower_actor, shared_book.id)
    second = lending.borrow(other_actor, shared_book.id)
    lending.return_book(borrower_actor, shared_book.id)

    page = lending.list_lent(owner_actor)
    assert [t.id for t in page.items] == [second, first]
    assert lending.list_lent(borrower_actor).total_elements == 0
