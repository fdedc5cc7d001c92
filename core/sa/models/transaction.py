# core/sa/models/transaction.py
from datetime import datetime
from sqlalchemy import Integer, Boolean, ForeignKey, DateTime, Index, text
from sqlalchemy.orm import relationship, Mapped, mapped_column, composite
from .base import Base, AuditInfo

class BookTransaction(Base):
    """One borrow of a book by a user, from request through approved return."""
    __tablename__ = 'book_transaction'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    returned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    returned_approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    audit: Mapped[AuditInfo] = composite('created_by', 'created_at')

    # Relationships
    book = relationship('Book', back_populates='transactions')
    user = relationship('User', back_populates='transactions')

    __table_args__ = (
        # At most one open loan per (book, borrower)
        Index(
            'uix_book_transaction_unresolved',
            'book_id', 'user_id',
            unique=True,
            sqlite_where=text('returned = 0 AND returned_approved = 0'),
            postgresql_where=text('NOT returned AND NOT returned_approved'),
        ),
        Index('idx_book_transaction_user_id', 'user_id'),
        Index('idx_book_transaction_book_id', 'book_id'),
    )
