# core/sa/repositories/pagination.py
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

T = TypeVar('T')


@dataclass
class Page(Generic[T]):
    """One page of results. ``number`` is 1-based."""
    items: List[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return (self.total_elements + self.size - 1) // self.size

    @property
    def first(self) -> bool:
        return self.number == 1

    @property
    def last(self) -> bool:
        return self.number >= self.total_pages


def paginate(session: Session, query: Select, page: int, size: int) -> Page:
    """Run ``query`` for one page and count the full result set.

    Args:
        session: SQLAlchemy session
        query: An ordered select of a single entity
        page: Page number (1-based)
        size: Number of items per page

    Returns:
        Page holding the items of the requested page
    """
    total = session.scalar(select(func.count()).select_from(query.order_by(None).subquery()))
    offset = (page - 1) * size
    items = session.scalars(query.offset(offset).limit(size)).all()
    return Page(items=list(items), number=page, size=size, total_elements=total or 0)
