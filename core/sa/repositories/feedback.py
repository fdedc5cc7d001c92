from sqlalchemy import select, desc
from sqlalchemy.orm import Session
from core.sa.models import Feedback, AuditInfo
from core.sa.repositories.pagination import Page, paginate

class FeedbackRepository:
    """Repository for managing Feedback entities."""

    def __init__(self, session: Session):
        self.session = session

    def create_feedback(self, book_id: int, author_id: int, note: float, comment: str) -> Feedback:
        feedback = Feedback(
            book_id=book_id,
            note=note,
            comment=comment,
            audit=AuditInfo.now(author_id),
        )
        self.session.add(feedback)
        self.session.commit()
        return feedback

    def find_by_book(self, book_id: int, page: int = 1, size: int = 10) -> Page[Feedback]:
        query = (
            select(Feedback)
            .where(Feedback.book_id == book_id)
            .order_by(desc(Feedback.created_at), desc(Feedback.id))
        )
        return paginate(self.session, query, page, size)
