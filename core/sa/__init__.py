from .database import Database
from .models import (
    Base, AuditInfo, User, Role, Book, BookTransaction, Feedback
)

__all__ = [
    'Database',
    'Base',
    'AuditInfo',
    'User',
    'Role',
    'Book',
    'BookTransaction',
    'Feedback'
]
