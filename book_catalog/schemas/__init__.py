"""
Pydantic Schemas Package

Request/response validation for the API.

The store holds frozen dataclasses (book_catalog.models); these schemas
control what clients may submit and what they get back.

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate: Fields accepted when adding a record
- XxxResponse: Fields returned in API responses
"""

from book_catalog.schemas.book import BookBase, BookCreate, BookResponse
from book_catalog.schemas.review import (
    BookRatingStats,
    ReviewCreate,
    ReviewResponse,
)

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookResponse",
    # Review schemas
    "ReviewCreate",
    "ReviewResponse",
    "BookRatingStats",
]
