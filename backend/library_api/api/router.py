from fastapi import APIRouter

from .routes import authors, books, reviews

api_router = APIRouter()
api_router.include_router(authors.router, prefix="/authors", tags=["authors"])
api_router.include_router(books.router, prefix="/books", tags=["books"])
api_router.include_router(reviews.router, tags=["reviews"])
