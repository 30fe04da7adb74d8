from fastapi import APIRouter, Depends

from ...models import Review
from ...schemas.common import MessageResponse
from ...schemas.review import ReviewRequest, ReviewResponse
from ...services.review_service import ReviewService
from ..deps import get_review_service

router = APIRouter()


@router.put("/reviews/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int,
    payload: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> Review:
    return await service.update_review(review_id, payload)


@router.delete("/reviews/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: int,
    service: ReviewService = Depends(get_review_service),
) -> MessageResponse:
    await service.delete_review(review_id)
    return MessageResponse(message="review deleted successfully")
