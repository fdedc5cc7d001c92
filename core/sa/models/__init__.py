from .base import Base, AuditInfo
from .user import User, Role, user_role
from .book import Book
from .transaction import BookTransaction
from .feedback import Feedback

__all__ = [
    'Base',
    'AuditInfo',
    'User',
    'Role',
    'user_role',
    'Book',
    'BookTransaction',
    'Feedback'
]
