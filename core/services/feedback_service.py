# core/services/feedback_service.py

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from core.exceptions import NotFound, InvalidInput
from core.identity import Identity
from core.lending.rules import check_can_feedback
from core.sa.repositories.book import BookRepository
from core.sa.repositories.feedback import FeedbackRepository
from core.sa.repositories.pagination import Page

logger = logging.getLogger(__name__)

MIN_NOTE = 0.0
MAX_NOTE = 5.0


@dataclass
class FeedbackView:
    """Feedback as seen by one reader."""
    id: int
    note: float
    comment: str
    own_feedback: bool


class FeedbackService:
    def __init__(self, session: Session):
        self.books = BookRepository(session)
        self.feedbacks = FeedbackRepository(session)

    def attach_feedback(self, actor: Identity, book_id: int, note: float, comment: str) -> int:
        """Leave feedback on a book.

        Any user other than the owner may review a shareable, non-archived
        book; having borrowed it is not required.

        Raises:
            NotFound: If the book does not exist
            NotPermitted: If the book is not lendable or owned by the actor
            InvalidInput: If the note is outside [0, 5] or the comment is blank
        """
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFound(f"Book not found with id: {book_id}")
        check_can_feedback(actor, book)

        if note is None or not MIN_NOTE <= note <= MAX_NOTE:
            raise InvalidInput(f"Note must be between {MIN_NOTE:g} and {MAX_NOTE:g}")
        if not comment or not comment.strip():
            raise InvalidInput("Comment can't be empty")

        feedback = self.feedbacks.create_feedback(book_id, actor.id, float(note), comment)
        logger.info(f"User {actor.id} left feedback {feedback.id} on book {book_id}")
        return feedback.id

    def list_for_book(self, actor: Identity, book_id: int, page: int = 1, size: int = 10) -> Page[FeedbackView]:
        feedbacks = self.feedbacks.find_by_book(book_id, page, size)
        views = [
            FeedbackView(
                id=f.id,
                note=f.note,
                comment=f.comment,
                own_feedback=f.audit.created_by == actor.id
            )
            for f in feedbacks.items
        ]
        return Page(items=views, number=feedbacks.number, size=feedbacks.size,
                    total_elements=feedbacks.total_elements)
