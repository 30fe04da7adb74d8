from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1, le=100)


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_records: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    page: int
    page_size: int
    has_more: bool


class Page(BaseModel, Generic[T]):
    data: list[T]
    pagination: Pagination
