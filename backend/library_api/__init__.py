"""Book Library API: authors, books and reviews over FastAPI and SQLAlchemy."""

__version__ = "1.0.0"
