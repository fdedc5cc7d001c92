# api/schemas/book.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

class BookCreate(BaseModel):
    title: str
    author_name: str
    isbn: str
    synopsis: Optional[str] = None
    shareable: bool = False

class Book(BaseModel):
    id: int
    title: str
    author_name: str
    isbn: str
    synopsis: Optional[str] = None
    owner: str
    rate: float
    archived: bool
    shareable: bool
    cover: Optional[str] = None  # base64 JPEG

    model_config = ConfigDict(from_attributes=True)

class BorrowedBook(BaseModel):
    transaction_id: int
    id: int
    title: str
    author_name: str
    isbn: str
    rate: float
    returned: bool
    returned_approved: bool

    model_config = ConfigDict(from_attributes=True)
