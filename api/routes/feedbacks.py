# api/routes/feedbacks.py

from fastapi import APIRouter, Depends, Query

from core.identity import Identity
from core.services import FeedbackService
from api.dependencies import get_current_actor, get_feedback_service
from api.mapper import to_paginated
from api.schemas.common import ERROR_RESPONSES, PaginatedResponse
from api.schemas.feedback import Feedback, FeedbackCreate

router = APIRouter(prefix="/feedbacks", tags=["feedbacks"], responses=ERROR_RESPONSES)

@router.post("", response_model=int)
def save_feedback(
    request: FeedbackCreate,
    actor: Identity = Depends(get_current_actor),
    service: FeedbackService = Depends(get_feedback_service)
):
    return service.attach_feedback(actor, request.book_id, request.note, request.comment)

@router.get("/book/{book_id}", response_model=PaginatedResponse[Feedback])
def get_book_feedbacks(
    book_id: int,
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    actor: Identity = Depends(get_current_actor),
    service: FeedbackService = Depends(get_feedback_service)
):
    """
    Get the feedback left on a book. Each item is flagged ``own_feedback``
    when the current user wrote it.
    """
    page_result = service.list_for_book(actor, book_id, page, size)
    return to_paginated(page_result, lambda view: Feedback.model_validate(view))
