# core/sa/models/base.py
from dataclasses import dataclass
from datetime import datetime, UTC
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models"""
    pass


@dataclass
class AuditInfo:
    """Who created a record and when. Mapped as a composite on each entity."""
    created_by: int
    created_at: datetime

    @classmethod
    def now(cls, created_by: int) -> "AuditInfo":
        return cls(created_by=created_by, created_at=datetime.now(UTC))
