# core/sa/models/feedback.py
from datetime import datetime
from sqlalchemy import Integer, Float, String, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column, composite
from .base import Base, AuditInfo

class Feedback(Base):
    __tablename__ = 'feedback'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    note: Mapped[float] = mapped_column(Float, nullable=False)
    comment: Mapped[str] = mapped_column(String, nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    created_by: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    audit: Mapped[AuditInfo] = composite('created_by', 'created_at')

    book = relationship('Book', back_populates='feedbacks')

    __table_args__ = (
        Index('idx_feedback_book_id', 'book_id'),
    )
