from fastapi import APIRouter

from ...schemas.common import HelloRequest, MessageResponse

router = APIRouter()


@router.get("/ping", response_model=MessageResponse)
async def ping() -> MessageResponse:
    """Simple liveness check, no database access."""
    return MessageResponse(message="pong")


@router.get("/hello", response_model=MessageResponse)
async def hello() -> MessageResponse:
    return MessageResponse(message="Hello, World!")


@router.get("/helloWithPayload", response_model=MessageResponse)
async def hello_with_payload(payload: HelloRequest) -> MessageResponse:
    return MessageResponse(message=f"Hello, {payload.name} {payload.surname}!")
