from fastapi import APIRouter, Depends, status

from ...models import Author
from ...schemas.author import AuthorRequest, AuthorResponse
from ...schemas.common import MessageResponse
from ...schemas.pagination import Page, PaginationQuery
from ...services.author_service import AuthorService
from ...utils.pagination import create_pagination_response
from ..deps import get_author_service, pagination_params

router = APIRouter()


@router.post("", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED)
async def create_author(
    payload: AuthorRequest,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    """Create a new author."""
    return await service.create_author(payload)


@router.get("", response_model=Page[AuthorResponse])
async def list_authors(
    params: PaginationQuery = Depends(pagination_params),
    service: AuthorService = Depends(get_author_service),
) -> Page[AuthorResponse]:
    """List authors with their books, one page at a time."""
    total, items = await service.list_authors(params)
    return Page[AuthorResponse](
        data=items, pagination=create_pagination_response(total, params)
    )


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    return await service.get_author(author_id)


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: int,
    payload: AuthorRequest,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    return await service.update_author(author_id, payload)


@router.delete("/{author_id}", response_model=MessageResponse)
async def delete_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> MessageResponse:
    await service.delete_author(author_id)
    return MessageResponse(message="author deleted successfully")
