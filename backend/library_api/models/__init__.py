from .author import Author
from .book import Book
from .review import Review

__all__ = [
    "Author",
    "Book",
    "Review",
]
