from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_db
from ..schemas.pagination import PaginationQuery
from ..services.author_service import AuthorService
from ..services.book_service import BookService
from ..services.review_service import ReviewService
from ..utils.pagination import parse_pagination_query


def get_author_service(db: AsyncSession = Depends(get_db)) -> AuthorService:
    return AuthorService(db)


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    return BookService(db)


def get_review_service(db: AsyncSession = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


def pagination_params(
    page: str | None = Query(None, description="Page number"),
    page_size: str | None = Query(None, description="Page size"),
) -> PaginationQuery:
    # raw strings so malformed values fall back to defaults instead of a 422
    return parse_pagination_query(page, page_size)
