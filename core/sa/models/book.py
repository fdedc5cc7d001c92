# core/sa/models/book.py
from datetime import datetime
from sqlalchemy import String, Integer, Boolean, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column, composite
from .base import Base, AuditInfo

class Book(Base):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False)
    synopsis: Mapped[str | None] = mapped_column(String, nullable=True)
    book_cover: Mapped[str | None] = mapped_column(String, nullable=True)
    archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    shareable: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    owner_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    audit: Mapped[AuditInfo] = composite('created_by', 'created_at')

    # Relationships
    owner = relationship('User', back_populates='books')
    transactions = relationship('BookTransaction', back_populates='book')
    feedbacks = relationship('Feedback', back_populates='book')

    __table_args__ = (
        Index('idx_book_owner_id', 'owner_id'),
        Index('idx_book_created_at', 'created_at'),
    )

    @property
    def rate(self) -> float:
        """Average feedback note rounded to one decimal, 0.0 without feedback."""
        if not self.feedbacks:
            return 0.0
        average = sum(f.note for f in self.feedbacks) / len(self.feedbacks)
        return round(average, 1)
