from typing import Sequence

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.logging import get_logger
from ..models import Author, Book, Review
from ..schemas.book import BookRequest
from ..schemas.pagination import PaginationQuery
from ..utils.pagination import paginate

logger = get_logger("services.books")


class BookService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_author(self, author_id: int) -> None:
        stmt = select(Author.id).where(Author.id == author_id, Author.deleted_at.is_(None))
        if await self.db.scalar(stmt) is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="author not found")

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning("Rejected book write: %s", exc.orig)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="book with this isbn already exists",
            ) from exc

    async def list_books(self, pagination: PaginationQuery) -> tuple[int, Sequence[Book]]:
        base_stmt = select(Book).where(Book.deleted_at.is_(None))

        total_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = await self.db.scalar(total_stmt)

        stmt = paginate(base_stmt.order_by(Book.id), pagination).options(
            selectinload(Book.author.and_(Author.deleted_at.is_(None)))
        )
        result = await self.db.execute(stmt)
        return total or 0, result.scalars().all()

    async def get_book(self, book_id: int, with_reviews: bool = False) -> Book:
        stmt = (
            select(Book)
            .where(Book.id == book_id, Book.deleted_at.is_(None))
            .options(selectinload(Book.author.and_(Author.deleted_at.is_(None))))
            .execution_options(populate_existing=True)
        )
        if with_reviews:
            stmt = stmt.options(selectinload(Book.reviews.and_(Review.deleted_at.is_(None))))
        book = await self.db.scalar(stmt)
        if not book:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="book not found")
        return book

    async def create_book(self, payload: BookRequest) -> Book:
        await self._ensure_author(payload.author_id)

        book = Book(
            title=payload.title,
            isbn=payload.isbn,
            publication_year=payload.publication_year,
            description=payload.description,
            author_id=payload.author_id,
        )
        self.db.add(book)
        await self._commit()
        logger.info("Created book %s (isbn=%s)", book.id, book.isbn)
        return await self.get_book(book.id)

    async def update_book(self, book_id: int, payload: BookRequest) -> Book:
        book = await self.get_book(book_id)
        await self._ensure_author(payload.author_id)

        book.title = payload.title
        book.isbn = payload.isbn
        book.publication_year = payload.publication_year
        book.description = payload.description
        book.author_id = payload.author_id
        await self._commit()
        logger.info("Updated book %s", book_id)
        return await self.get_book(book_id)

    async def delete_book(self, book_id: int) -> None:
        book = await self.get_book(book_id)
        book.soft_delete()
        await self.db.commit()
        logger.info("Deleted book %s", book_id)
