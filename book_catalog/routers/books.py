"""
Books Router

Endpoints for browsing and adding books.

Endpoints:
- GET /books/ - List books, optionally filtered by genre, author or search text
- POST /books/ - Add a book
- GET /books/{book_id} - Get a single book

Filtering follows the browse page rules: a genre filter wins over an author
filter, which wins over free-text search.
"""


from fastapi import APIRouter, status

from book_catalog.dependencies import BookFilters, Store, get_book_or_404
from book_catalog.schemas import BookCreate, BookResponse


router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "/",
    response_model=list[BookResponse],
    summary="List books",
    description="List every book in storage order, or filter by genre, author or search text.",
)
def list_books(store: Store, filters: BookFilters) -> list[BookResponse]:
    """
    List books with an optional filter.

    - genre: exact tag match
    - author: partial, case-insensitive author match
    - q: case-insensitive search over title, author and genre tags
    """
    books = filters.apply(store)
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
    description="Add a book to the catalog. Title, author, cover image and at least one genre are required.",
)
def create_book(book_data: BookCreate, store: Store) -> BookResponse:
    """
    Add a new book.

    The book starts unrated; its rating appears once it has a review.

    Returns:
        The stored book with its assigned id
    """
    book = store.add_book(
        title=book_data.title,
        author=book_data.author,
        genre=book_data.genre,
        description=book_data.description,
        cover_image=book_data.cover_image,
        publication_year=book_data.publication_year,
    )
    return BookResponse.model_validate(book)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a single book, including its current average rating.",
)
def get_book(book_id: str, store: Store) -> BookResponse:
    """Get a single book by ID."""
    book = get_book_or_404(store, book_id)
    return BookResponse.model_validate(book)
