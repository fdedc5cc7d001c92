from .rules import (
    check_can_borrow,
    check_can_return,
    check_can_approve,
    check_can_feedback,
    check_is_owner,
)

__all__ = [
    'check_can_borrow',
    'check_can_return',
    'check_can_approve',
    'check_can_feedback',
    'check_is_owner',
]
