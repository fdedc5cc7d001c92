# api/schemas/common.py
from typing import Generic, List, TypeVar
from pydantic import BaseModel

DataT = TypeVar("DataT")


class PaginatedResponse(BaseModel, Generic[DataT]):
    """
    Generic schema for paginated API responses.
    """
    page: int
    size: int
    total_pages: int
    total_items: int
    first: bool
    last: bool
    data: List[DataT]


class ErrorResponse(BaseModel):
    code: str
    message: str


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    403: {"model": ErrorResponse, "description": "Operation not permitted"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
    409: {"model": ErrorResponse, "description": "Book already borrowed"},
}
