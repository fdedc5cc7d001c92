# api/routes/books.py

from fastapi import APIRouter, Depends, File, Query, UploadFile

from core.identity import Identity
from core.services import BookService, LendingService
from api.dependencies import get_current_actor, get_book_service, get_lending_service
from api.mapper import to_book_schema, to_borrowed_book, to_paginated
from api.schemas.book import Book, BookCreate, BorrowedBook
from api.schemas.common import ERROR_RESPONSES, PaginatedResponse

router = APIRouter(prefix="/books", tags=["books"], responses=ERROR_RESPONSES)

@router.post("", response_model=int)
def create_book(
    request: BookCreate,
    actor: Identity = Depends(get_current_actor),
    service: BookService = Depends(get_book_service)
):
    """Publish a book owned by the current user."""
    return service.create_book(
        actor,
        title=request.title,
        author_name=request.author_name,
        isbn=request.isbn,
        synopsis=request.synopsis,
        shareable=request.shareable
    )

@router.get("", response_model=PaginatedResponse[Book])
def get_books(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    actor: Identity = Depends(get_current_actor),
    service: BookService = Depends(get_book_service)
):
    """
    Get the books the current user can borrow: shareable, not archived
    and owned by someone else.
    """
    return to_paginated(service.list_displayable(actor, page, size), to_book_schema)

@router.get("/owner", response_model=PaginatedResponse[Book])
def get_owned_books(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    actor: Identity = Depends(get_current_actor),
    service: BookService = Depends(get_book_service)
):
    return to_paginated(service.list_owned(actor, page, size), to_book_schema)

@router.get("/borrowed", response_model=PaginatedResponse[BorrowedBook])
def get_borrowed_books(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    """Get every loan the current user has taken, including closed ones."""
    return to_paginated(service.list_borrowed(actor, page, size), to_borrowed_book)

@router.get("/returned", response_model=PaginatedResponse[BorrowedBook])
def get_returned_books(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(10, ge=1, le=100, description="Items per page"),
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    """Get every loan of the current user's books, with its return state."""
    return to_paginated(service.list_lent(actor, page, size), to_borrowed_book)

@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: int,
    actor: Identity = Depends(get_current_actor),
    service: BookService = Depends(get_book_service)
):
    return to_book_schema(service.get_book(book_id))

@router.patch("/shareable/{book_id}", response_model=int)
def update_shareable_status(
    book_id: int,
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    return service.toggle_shareable(actor, book_id)

@router.patch("/archived/{book_id}", response_model=int)
def update_archived_status(
    book_id: int,
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    return service.toggle_archived(actor, book_id)

@router.post("/borrow/{book_id}", response_model=int)
def borrow_book(
    book_id: int,
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    """Borrow a book. Returns the ID of the new transaction."""
    return service.borrow(actor, book_id)

@router.patch("/borrow/return/{book_id}", response_model=int)
def return_borrowed_book(
    book_id: int,
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    return service.return_book(actor, book_id)

@router.patch("/borrow/return/approve/{book_id}", response_model=int)
def approve_return_borrowed_book(
    book_id: int,
    actor: Identity = Depends(get_current_actor),
    service: LendingService = Depends(get_lending_service)
):
    return service.approve_return(actor, book_id)

@router.post("/cover/{book_id}", response_model=int, status_code=202)
async def upload_book_cover(
    book_id: int,
    file: UploadFile = File(..., description="Cover image"),
    actor: Identity = Depends(get_current_actor),
    service: BookService = Depends(get_book_service)
):
    """Upload a cover image as a multipart file part."""
    image_data = await file.read()
    return service.upload_cover(actor, book_id, image_data)
