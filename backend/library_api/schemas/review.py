from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewRequest(BaseModel):
    rating: int = Field(ge=1, le=5)
    comment: str = ""


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rating: int
    comment: str
    date_posted: datetime
    book_id: int
    created_at: datetime
    updated_at: datetime
