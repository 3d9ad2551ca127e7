"""
Reviews Router

Endpoints for book reviews.

Endpoints:
- GET /books/{book_id}/reviews - List reviews for a book
- POST /books/{book_id}/reviews - Add a review
- GET /books/{book_id}/rating - Get book rating statistics

Business Rules:
- Rating must be 1-5 and a username is required
- Reviews can only be added for books that exist
- Adding a review updates the book's average rating
"""

import logging
from enum import StrEnum

from fastapi import APIRouter, Query, status

from book_catalog.dependencies import Store, get_book_or_404
from book_catalog.schemas import BookRatingStats, ReviewCreate, ReviewResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Reviews"],
    responses={
        404: {"description": "Book not found"},
    },
)


class ReviewOrder(StrEnum):
    """Ordering of a book's review list."""

    OLDEST = "oldest"
    NEWEST = "newest"


@router.get(
    "/books/{book_id}/reviews",
    response_model=list[ReviewResponse],
    summary="List reviews for a book",
    description="Get every review for a book, oldest first unless order=newest.",
)
def list_book_reviews(
    book_id: str,
    store: Store,
    order: ReviewOrder = Query(
        default=ReviewOrder.OLDEST,
        description="oldest (insertion order) or newest first",
    ),
) -> list[ReviewResponse]:
    """
    List all reviews for a specific book.

    Raises:
        HTTPException: 404 if book not found
    """
    get_book_or_404(store, book_id)

    reviews = store.list_reviews(book_id)
    if order == ReviewOrder.NEWEST:
        reviews.reverse()

    return [ReviewResponse.model_validate(r) for r in reviews]


@router.post(
    "/books/{book_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a review",
    description="Add a star-rated review to a book and update its average rating.",
)
def create_review(
    book_id: str,
    review_data: ReviewCreate,
    store: Store,
) -> ReviewResponse:
    """
    Add a review for a book.

    The store itself would keep a review for an unknown book as an orphan;
    the API refuses it instead.

    Raises:
        HTTPException: 404 if book not found
    """
    get_book_or_404(store, book_id)

    review = store.add_review(
        book_id=book_id,
        username=review_data.username,
        rating=review_data.rating,
        comment=review_data.comment,
    )
    return ReviewResponse.model_validate(review)


@router.get(
    "/books/{book_id}/rating",
    response_model=BookRatingStats,
    summary="Get book rating statistics",
    description="Get aggregated rating statistics for a book.",
)
def get_book_rating_stats(book_id: str, store: Store) -> BookRatingStats:
    """
    Get rating statistics for a book.

    Returns:
        - Average rating (null if there are no reviews)
        - Total review count
        - Rating distribution (count of each rating 1-5)
    """
    get_book_or_404(store, book_id)
    return BookRatingStats.model_validate(store.rating_stats(book_id))
