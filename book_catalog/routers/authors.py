"""
Authors Router

Authors are the distinct author names found on books.
"""

from typing import List

from fastapi import APIRouter

from book_catalog.dependencies import Store
from book_catalog.schemas import BookResponse

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
)


@router.get(
    "/",
    response_model=List[str],
    summary="List all authors",
    description="Distinct author names, sorted alphabetically.",
)
def list_authors(store: Store) -> List[str]:
    """List all authors."""
    return store.authors()


@router.get(
    "/{author:path}/books",
    response_model=List[BookResponse],
    summary="Get books by author",
    description="Books whose author name contains the given text, ignoring case.",
)
def get_author_books(author: str, store: Store) -> List[BookResponse]:
    """Get all books by a matching author."""
    return [BookResponse.model_validate(b) for b in store.books_by_author(author)]
