from typing import Sequence

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.logging import get_logger
from ..db.base import utcnow
from ..models import Book, Review
from ..schemas.pagination import PaginationQuery
from ..schemas.review import ReviewRequest
from ..utils.pagination import paginate

logger = get_logger("services.reviews")


class ReviewService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_book(self, book_id: int) -> None:
        stmt = select(Book.id).where(Book.id == book_id, Book.deleted_at.is_(None))
        if await self.db.scalar(stmt) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="book not found")

    async def list_reviews(
        self, book_id: int, pagination: PaginationQuery
    ) -> tuple[int, Sequence[Review]]:
        await self._ensure_book(book_id)

        base_stmt = select(Review).where(Review.book_id == book_id, Review.deleted_at.is_(None))

        total_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = await self.db.scalar(total_stmt)

        stmt = paginate(base_stmt.order_by(Review.id), pagination)
        result = await self.db.execute(stmt)
        return total or 0, result.scalars().all()

    async def get_review(self, review_id: int) -> Review:
        stmt = select(Review).where(Review.id == review_id, Review.deleted_at.is_(None))
        review = await self.db.scalar(stmt)
        if not review:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="review not found")
        return review

    async def create_review(self, book_id: int, payload: ReviewRequest) -> Review:
        await self._ensure_book(book_id)

        review = Review(
            rating=payload.rating,
            comment=payload.comment,
            date_posted=utcnow(),
            book_id=book_id,
        )
        self.db.add(review)
        await self.db.commit()
        await self.db.refresh(review)
        logger.info("Created review %s for book %s", review.id, book_id)
        return review

    async def update_review(self, review_id: int, payload: ReviewRequest) -> Review:
        review = await self.get_review(review_id)
        review.rating = payload.rating
        review.comment = payload.comment
        await self.db.commit()
        await self.db.refresh(review)
        logger.info("Updated review %s", review_id)
        return review

    async def delete_review(self, review_id: int) -> None:
        review = await self.get_review(review_id)
        review.soft_delete()
        await self.db.commit()
        logger.info("Deleted review %s", review_id)
