# api/dependencies.py
"""Request-scoped dependencies: the acting user and the services."""

from typing import Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from core.identity import Identity
from core.sa.database import DEFAULT_ROLE, get_db
from core.sa.repositories.user import UserRepository
from core.services import BookService, LendingService, FeedbackService
from core.utils.image import CoverStorage


def get_current_actor(
    x_user_id: Optional[str] = Header(None, description="User ID set by the authentication gateway"),
    db: Session = Depends(get_db)
) -> Identity:
    """Resolve the authenticated user for this request.

    Credentials are checked upstream; this only maps the forwarded user ID
    to an enabled, unlocked account holding the USER role.
    """
    if x_user_id is None or not x_user_id.strip().isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    user = UserRepository(db).get_by_id(int(x_user_id))
    if user is None or not user.enabled or user.account_locked:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    actor = Identity.from_user(user)
    if not actor.has_role(DEFAULT_ROLE):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Missing required role")
    return actor


def get_cover_storage() -> CoverStorage:
    return CoverStorage()


def get_book_service(
    db: Session = Depends(get_db),
    cover_storage: CoverStorage = Depends(get_cover_storage)
) -> BookService:
    return BookService(db, cover_storage)


def get_lending_service(db: Session = Depends(get_db)) -> LendingService:
    return LendingService(db)


def get_feedback_service(db: Session = Depends(get_db)) -> FeedbackService:
    return FeedbackService(db)
