"""
Ratings Service

Rating aggregation for books.

A book's ``rating`` is denormalized: the store recalculates it whenever a
review is added so that book listings never need to scan reviews.

The mean is computed as a float and its exact binary value is rounded half-up
to one decimal place. A mean of 4.25 becomes 4.3, while 87/20, stored as
4.3499999..., becomes 4.3 rather than 4.4.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

RATING_VALUES = (1, 2, 3, 4, 5)

_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class RatingStats:
    """Aggregated rating statistics for a book."""

    book_id: str
    average_rating: float | None
    total_reviews: int
    rating_distribution: dict[int, int] = field(
        default_factory=lambda: {value: 0 for value in RATING_VALUES}
    )


def average_rating(ratings: Iterable[int]) -> float | None:
    """
    Mean of the given ratings rounded to one decimal place.

    Args:
        ratings: Individual review ratings

    Returns:
        The rounded mean, or None if there are no ratings
    """
    values = list(ratings)
    if not values:
        return None

    mean = Decimal(sum(values) / len(values))
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def rating_distribution(ratings: Iterable[int]) -> dict[int, int]:
    """Count of each star value; always has keys 1 through 5."""
    distribution = {value: 0 for value in RATING_VALUES}
    for rating in ratings:
        distribution[rating] = distribution.get(rating, 0) + 1
    return distribution


def calculate_rating_stats(book_id: str, ratings: Iterable[int]) -> RatingStats:
    """
    Build rating statistics for one book.

    Args:
        book_id: ID of the book the ratings belong to
        ratings: Ratings of every review for that book

    Returns:
        RatingStats with average, count and distribution
    """
    values = list(ratings)
    return RatingStats(
        book_id=book_id,
        average_rating=average_rating(values),
        total_reviews=len(values),
        rating_distribution=rating_distribution(values),
    )
