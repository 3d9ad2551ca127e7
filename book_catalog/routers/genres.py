"""
Genres Router

Genres are not stored on their own: they are the distinct tags found on
books. Tag matching is exact and case-sensitive.
"""

from typing import List

from fastapi import APIRouter, Query

from book_catalog.dependencies import Store
from book_catalog.schemas import BookResponse

router = APIRouter(
    prefix="/genres",
    tags=["Genres"],
)


@router.get(
    "/",
    response_model=List[str],
    summary="List all genres",
    description="Distinct genre tags across all books, sorted alphabetically.",
)
def list_genres(
    store: Store,
    limit: int | None = Query(
        default=None,
        ge=1,
        le=100,
        description="Return only the first N genres",
    ),
) -> List[str]:
    """List all genres."""
    genres = store.genres()
    return genres[:limit] if limit else genres


@router.get(
    "/{genre:path}/books",
    response_model=List[BookResponse],
    summary="Get books in genre",
    description="Books tagged with exactly this genre, in storage order.",
)
def get_genre_books(genre: str, store: Store) -> List[BookResponse]:
    """
    Get all books in a specific genre.

    An unknown genre gives an empty list rather than a 404.
    """
    return [BookResponse.model_validate(b) for b in store.books_by_genre(genre)]
