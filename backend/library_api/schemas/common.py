from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HelloRequest(BaseModel):
    name: str
    surname: str
