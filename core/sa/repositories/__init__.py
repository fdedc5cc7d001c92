from .pagination import Page, paginate
from .user import UserRepository
from .book import BookRepository
from .transaction import TransactionRepository
from .feedback import FeedbackRepository

__all__ = [
    'Page',
    'paginate',
    'UserRepository',
    'BookRepository',
    'TransactionRepository',
    'FeedbackRepository'
]
