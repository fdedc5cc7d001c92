from types import SimpleNamespace

import pytest

from core.exceptions import NotPermitted
from core.identity import Identity
from core.lending.rules import (
    check_can_borrow, check_can_return, check_can_approve, check_can_feedback, check_is_owner
)

OWNER = Identity(id=1, roles=frozenset({"USER"}))
READER = Identity(id=2, roles=frozenset({"USER"}))

def make_book(archived=False, shareable=True, owner_id=OWNER.id):
    return SimpleNamespace(archived=archived, shareable=shareable, owner_id=owner_id)

BORROWER_CHECKS = [check_can_borrow, check_can_return, check_can_feedback]
ALL_CHECKS = BORROWER_CHECKS + [check_can_approve]

@pytest.mark.parametrize("check", ALL_CHECKS)
@pytest.mark.parametrize("archived,shareable", [(True, True), (False, False), (True, False)])
@pytest.mark.parametrize("actor", [OWNER, READER])
def test_unavailable_book_is_never_permitted(check, archived, shareable, actor):
    """Archived or unshareable books block every action, for every actor."""
    with pytest.raises(NotPermitted):
        check(actor, make_book(archived=archived, shareable=shareable))

@pytest.mark.parametrize("check", BORROWER_CHECKS)
def test_owner_cannot_act_as_borrower(check):
    with pytest.raises(NotPermitted, match="own book"):
        check(OWNER, make_book())

@pytest.mark.parametrize("check", BORROWER_CHECKS)
def test_other_user_is_permitted(check):
    assert check(READER, make_book()) is None

def test_only_owner_can_approve():
    assert check_can_approve(OWNER, make_book()) is None
    with pytest.raises(NotPermitted, match="your own books"):
        check_can_approve(READER, make_book())

def test_availability_is_checked_before_ownership():
    with pytest.raises(NotPermitted, match="archived or not shareable"):
        check_can_borrow(OWNER, make_book(archived=True))

def test_owner_check_ignores_flags():
    """Flag toggles must work on archived books, or they could never be unarchived."""
    assert check_is_owner(OWNER, make_book(archived=True, shareable=False), "archived status") is None
    with pytest.raises(NotPermitted, match="archived status"):
        check_is_owner(READER, make_book(), "archived status")

def test_identity_roles():
    assert OWNER.has_role("USER")
    assert not OWNER.has_role("ADMIN")
