"""
Search Router

Free-text search across title, author and genre tags.

The query is required and must contain a non-blank character: an empty
query would match every book, which is what GET /books/ is for. A non-blank
query is matched as given, surrounding spaces included.
"""

from typing import Annotated, List

from fastapi import APIRouter, HTTPException, Query

from book_catalog.dependencies import Store
from book_catalog.schemas import BookResponse

router = APIRouter(
    tags=["Search"],
)


@router.get(
    "/search",
    response_model=List[BookResponse],
    summary="Search books",
    description="Case-insensitive substring search over title, author and genre tags.",
)
def search_books(
    store: Store,
    q: Annotated[
        str,
        Query(
            min_length=1,
            max_length=100,
            description="Search query",
            examples=["austen", "fantasy"],
        ),
    ],
) -> List[BookResponse]:
    """
    Search books.

    Raises:
        HTTPException: 422 if the query is blank
    """
    if not q.strip():
        raise HTTPException(
            status_code=422,
            detail="Search query cannot be empty or whitespace",
        )
    return [BookResponse.model_validate(b) for b in store.search(q)]
