from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthorRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    biography: str = ""
    birth_date: date | None = None


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    biography: str
    birth_date: date | None = None


class AuthorBook(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    isbn: str
    publication_year: int | None = None
    description: str


class AuthorResponse(AuthorSummary):
    created_at: datetime
    updated_at: datetime
    books: list[AuthorBook] = []
