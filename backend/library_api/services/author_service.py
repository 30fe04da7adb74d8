from typing import Sequence

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.logging import get_logger
from ..models import Author, Book
from ..schemas.author import AuthorRequest
from ..schemas.pagination import PaginationQuery
from ..utils.pagination import paginate

logger = get_logger("services.authors")


class AuthorService:
    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _with_books():
        return selectinload(Author.books.and_(Book.deleted_at.is_(None)))

    async def list_authors(self, pagination: PaginationQuery) -> tuple[int, Sequence[Author]]:
        base_stmt = select(Author).where(Author.deleted_at.is_(None))

        total_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = await self.db.scalar(total_stmt)

        stmt = paginate(base_stmt.order_by(Author.id), pagination).options(self._with_books())
        result = await self.db.execute(stmt)
        return total or 0, result.scalars().all()

    async def get_author(self, author_id: int, with_books: bool = True) -> Author:
        stmt = select(Author).where(Author.id == author_id, Author.deleted_at.is_(None))
        if with_books:
            stmt = stmt.options(self._with_books()).execution_options(populate_existing=True)
        author = await self.db.scalar(stmt)
        if not author:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="author not found")
        return author

    async def create_author(self, payload: AuthorRequest) -> Author:
        author = Author(
            name=payload.name,
            biography=payload.biography,
            birth_date=payload.birth_date,
        )
        self.db.add(author)
        await self.db.commit()
        logger.info("Created author %s", author.id)
        return await self.get_author(author.id)

    async def update_author(self, author_id: int, payload: AuthorRequest) -> Author:
        author = await self.get_author(author_id, with_books=False)
        author.name = payload.name
        author.biography = payload.biography
        author.birth_date = payload.birth_date
        await self.db.commit()
        logger.info("Updated author %s", author_id)
        return await self.get_author(author_id)

    async def delete_author(self, author_id: int) -> None:
        author = await self.get_author(author_id, with_books=False)
        author.soft_delete()
        await self.db.commit()
        logger.info("Deleted author %s", author_id)
