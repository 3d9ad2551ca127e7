"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The catalog store is created once in the application lifespan and kept on
``app.state``; ``get_store`` hands it to routes. Tests replace it through
``app.dependency_overrides[get_store]``.

Common Dependency Patterns here:
- The shared catalog store
- Book lookup with 404 handling
- Browse filter parameters
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status

from book_catalog.models import Book
from book_catalog.store import CatalogStore


# =============================================================================
# Catalog Store
# =============================================================================
def get_store(request: Request) -> CatalogStore:
    """Return the catalog store created at application startup."""
    return request.app.state.store


Store = Annotated[CatalogStore, Depends(get_store)]


def get_book_or_404(store: CatalogStore, book_id: str) -> Book:
    """
    Get a book by ID or raise 404.

    The store reports a missing book as None; this helper turns that into
    the HTTP error clients see.

    Args:
        store: Catalog store
        book_id: ID of the book to find

    Returns:
        Book instance

    Raises:
        HTTPException: 404 if book not found
    """
    book = store.get_book(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )
    return book


# =============================================================================
# Browse Filters
# =============================================================================
class BookFilterParams:
    """
    Filter parameters for the book list endpoint.

    Only one filter is applied, in this order of precedence:
    - genre: exact genre tag (case-sensitive)
    - author: partial author name (case-insensitive)
    - q: free-text search over title, author and genre tags

    Blank values are treated as absent, so ``?q=`` lists every book. Other
    values are matched as given, surrounding spaces included.

    Usage:
        GET /api/v1/books?genre=Fantasy
        GET /api/v1/books?author=austen
        GET /api/v1/books?q=gatsby
    """

    def __init__(
        self,
        genre: str | None = Query(
            default=None,
            max_length=100,
            description="Filter by genre tag (exact match)",
            examples=["Fantasy", "Classic"],
        ),
        author: str | None = Query(
            default=None,
            max_length=100,
            description="Filter by author name (partial match, case-insensitive)",
            examples=["austen", "tolkien"],
        ),
        q: str | None = Query(
            default=None,
            max_length=100,
            description="Search title, author and genre (case-insensitive)",
            examples=["hobbit", "fiction"],
        ),
    ) -> None:
        self.genre = genre if genre and genre.strip() else None
        self.author = author if author and author.strip() else None
        self.q = q if q and q.strip() else None

    def apply(self, store: CatalogStore) -> list[Book]:
        """Run the matching store query."""
        if self.genre:
            return store.books_by_genre(self.genre)
        if self.author:
            return store.books_by_author(self.author)
        if self.q:
            return store.search(self.q)
        return store.list_books()


BookFilters = Annotated[BookFilterParams, Depends()]
