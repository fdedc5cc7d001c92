from .book_service import BookService
from .lending_service import LendingService
from .feedback_service import FeedbackService

__all__ = ['BookService', 'LendingService', 'FeedbackService']
