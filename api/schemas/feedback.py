# api/schemas/feedback.py
from pydantic import BaseModel, ConfigDict

class FeedbackCreate(BaseModel):
    note: float
    comment: str
    book_id: int

class Feedback(BaseModel):
    id: int
    note: float
    comment: str
    own_feedback: bool

    model_config = ConfigDict(from_attributes=True)
