"""
Recommendations Router

Endpoints:
- GET /books/featured - Highest rated books
- GET /books/recent - Most recently published books
- GET /books/{book_id}/similar - Content-based similar books

Similar books are scored by shared genre tags plus a bonus for the same
author. See book_catalog.services.recommendations for the details.

This router is registered before the books router so that /books/featured
and /books/recent are not captured by /books/{book_id}.
"""

from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from book_catalog.config import get_settings
from book_catalog.dependencies import Store, get_book_or_404
from book_catalog.schemas import BookResponse

settings = get_settings()


# =============================================================================
# Response Schemas
# =============================================================================


class SimilarBookItem(BaseModel):
    """A similar book with its score and reasons."""

    book: BookResponse
    similarity_score: int = Field(description="Shared genres plus author bonus")
    reasons: list[str] = Field(default_factory=list)


class SimilarBooksResponse(BaseModel):
    """Response for the similar books endpoint."""

    book_id: str
    items: list[SimilarBookItem]
    algorithm: str = "content-based"


# =============================================================================
# Router Configuration
# =============================================================================

router = APIRouter(
    tags=["Recommendations"],
)

Limit = Annotated[
    int | None,
    Query(
        description="Maximum number of books to return",
        ge=1,
        le=50,
    ),
]


@router.get(
    "/books/featured",
    response_model=list[BookResponse],
    summary="Get featured books",
    description="Highest rated books first. Unrated books rank as 0.",
)
def get_featured(store: Store, limit: Limit = None) -> list[BookResponse]:
    """Get the highest rated books."""
    books = store.featured_books(limit or settings.featured_books_limit)
    return [BookResponse.model_validate(b) for b in books]


@router.get(
    "/books/recent",
    response_model=list[BookResponse],
    summary="Get recent books",
    description="Most recently published books first. Books without a year rank last.",
)
def get_recent(store: Store, limit: Limit = None) -> list[BookResponse]:
    """Get the most recently published books."""
    books = store.recent_books(limit or settings.featured_books_limit)
    return [BookResponse.model_validate(b) for b in books]


@router.get(
    "/books/{book_id}/similar",
    response_model=SimilarBooksResponse,
    summary="Get similar books",
    description="""
Get books similar to a specific book.

Score: number of shared genre tags + 2 if the author is the same.

Books scoring 0 are left out. Equal scores keep catalog order.
""",
    responses={404: {"description": "Book not found"}},
)
def get_similar(book_id: str, store: Store, limit: Limit = None) -> SimilarBooksResponse:
    """Get books similar to the given book."""
    get_book_or_404(store, book_id)

    scored = store.similar_books_scored(book_id, limit or settings.similar_books_limit)
    return SimilarBooksResponse(
        book_id=book_id,
        items=[
            SimilarBookItem(
                book=BookResponse.model_validate(item.book),
                similarity_score=item.score,
                reasons=item.reasons,
            )
            for item in scored
        ],
    )
