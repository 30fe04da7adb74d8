from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .author import AuthorSummary
from .review import ReviewResponse


class BookRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    isbn: str = Field(min_length=1, max_length=32)
    publication_year: int | None = None
    description: str = ""
    author_id: int = Field(gt=0)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    isbn: str
    publication_year: int | None = None
    description: str
    author_id: int
    author: AuthorSummary | None = None
    created_at: datetime
    updated_at: datetime


class BookDetailResponse(BookResponse):
    reviews: list[ReviewResponse] = []
