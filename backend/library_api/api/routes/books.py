from fastapi import APIRouter, Depends, status

from ...models import Book, Review
from ...schemas.book import BookDetailResponse, BookRequest, BookResponse
from ...schemas.common import MessageResponse
from ...schemas.pagination import Page, PaginationQuery
from ...schemas.review import ReviewRequest, ReviewResponse
from ...services.book_service import BookService
from ...services.review_service import ReviewService
from ...utils.pagination import create_pagination_response
from ..deps import get_book_service, get_review_service, pagination_params

router = APIRouter()


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(
    payload: BookRequest,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book for an existing author."""
    return await service.create_book(payload)


@router.get("", response_model=Page[BookResponse])
async def list_books(
    params: PaginationQuery = Depends(pagination_params),
    service: BookService = Depends(get_book_service),
) -> Page[BookResponse]:
    total, items = await service.list_books(params)
    return Page[BookResponse](data=items, pagination=create_pagination_response(total, params))


@router.get("/{book_id}", response_model=BookDetailResponse)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book with its author and reviews."""
    return await service.get_book(book_id, with_reviews=True)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int,
    payload: BookRequest,
    service: BookService = Depends(get_book_service),
) -> Book:
    return await service.update_book(book_id, payload)


@router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> MessageResponse:
    await service.delete_book(book_id)
    return MessageResponse(message="book deleted successfully")


@router.get("/{book_id}/reviews", response_model=Page[ReviewResponse], tags=["reviews"])
async def list_book_reviews(
    book_id: int,
    params: PaginationQuery = Depends(pagination_params),
    service: ReviewService = Depends(get_review_service),
) -> Page[ReviewResponse]:
    total, items = await service.list_reviews(book_id, params)
    return Page[ReviewResponse](data=items, pagination=create_pagination_response(total, params))


@router.post(
    "/{book_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["reviews"],
)
async def create_review(
    book_id: int,
    payload: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> Review:
    return await service.create_review(book_id, payload)
