"""
Catalog Store

The in-memory owner of all books and reviews.

One CatalogStore is created by the application at startup and shared through
a FastAPI dependency; tests build fresh instances. Nothing outside the store
mutates its collections.

Key behaviors:
- Books are kept in an insertion-ordered dict keyed by id
- Reviews are kept in a list in insertion order
- IDs are decimal strings from per-collection counters ("1", "2", ...)
- Adding a review recalculates the reviewed book's average rating
- Lookups by unknown id return None or an empty list, never raise

Thread safety:
    FastAPI runs sync endpoints in a thread pool, so every operation takes the
    store's lock. ``add_review`` appends the review and recalculates the rating
    while holding it, so readers never see one without the other.
"""

import itertools
import logging
import threading
from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import UTC, datetime

from book_catalog.models import Book, Review
from book_catalog.services.ratings import (
    RatingStats,
    average_rating,
    calculate_rating_stats,
)
from book_catalog.services.recommendations import (
    ScoredBook,
    most_recent,
    rank_similar,
    top_rated,
)
from book_catalog.services.search import author_contains, has_genre, matches_query

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    In-memory book and review store.

    Args:
        books: Initial books, loaded as given (ids and ratings kept)
        reviews: Initial reviews, loaded as given (no rating recalculation)
    """

    def __init__(
        self,
        books: Iterable[Book] = (),
        reviews: Iterable[Review] = (),
    ) -> None:
        self._lock = threading.RLock()
        self._books: dict[str, Book] = {book.id: book for book in books}
        self._reviews: list[Review] = list(reviews)
        # Counters start after the initial data, like a fresh sequence would
        self._book_ids = itertools.count(len(self._books) + 1)
        self._review_ids = itertools.count(len(self._reviews) + 1)

    # =========================================================================
    # ID Generation
    # =========================================================================

    def _next_book_id(self) -> str:
        while True:
            candidate = str(next(self._book_ids))
            if candidate not in self._books:
                return candidate

    def _next_review_id(self) -> str:
        taken = {review.id for review in self._reviews}
        while True:
            candidate = str(next(self._review_ids))
            if candidate not in taken:
                return candidate

    # =========================================================================
    # Books
    # =========================================================================

    def list_books(self) -> list[Book]:
        """All books in storage order."""
        with self._lock:
            return list(self._books.values())

    def get_book(self, book_id: str) -> Book | None:
        """Look up a book by id, or None if there is no such book."""
        with self._lock:
            return self._books.get(book_id)

    def add_book(
        self,
        title: str,
        author: str,
        genre: Sequence[str],
        description: str = "",
        cover_image: str = "",
        rating: float | None = None,
        publication_year: int | None = None,
    ) -> Book:
        """
        Store a new book under a freshly assigned id.

        Fields are stored exactly as given. Required-field checks belong to
        the caller (the API schemas), not to the store.

        Returns:
            The stored Book, including its id
        """
        with self._lock:
            book = Book(
                id=self._next_book_id(),
                title=title,
                author=author,
                genre=tuple(genre),
                description=description,
                cover_image=cover_image,
                rating=rating,
                publication_year=publication_year,
            )
            self._books[book.id] = book

        logger.info(f"Added book {book.id}: {book.title!r} by {book.author}")
        return book

    def book_count(self) -> int:
        with self._lock:
            return len(self._books)

    # =========================================================================
    # Reviews
    # =========================================================================

    def list_reviews(self, book_id: str) -> list[Review]:
        """Reviews for a book in insertion order (oldest first)."""
        with self._lock:
            return [review for review in self._reviews if review.book_id == book_id]

    def add_review(
        self,
        book_id: str,
        username: str,
        rating: int,
        comment: str = "",
    ) -> Review:
        """
        Store a review and recalculate the book's average rating.

        The review is stored even if ``book_id`` matches no book; in that
        case no rating is updated and no error is raised.

        Returns:
            The stored Review with its id and timestamp
        """
        with self._lock:
            review = Review(
                id=self._next_review_id(),
                book_id=book_id,
                username=username,
                rating=rating,
                comment=comment,
                date=datetime.now(UTC),
            )
            self._reviews.append(review)

            book = self._books.get(book_id)
            if book is None:
                logger.warning(
                    f"Review {review.id} references unknown book {book_id}; "
                    "stored without a rating update"
                )
                return review

            new_rating = average_rating(
                r.rating for r in self._reviews if r.book_id == book_id
            )
            # Reassigning an existing key keeps the book's position
            self._books[book_id] = replace(book, rating=new_rating)

        logger.info(
            f"Added review {review.id} for book {book_id}; rating is now {new_rating}"
        )
        return review

    def review_count(self) -> int:
        with self._lock:
            return len(self._reviews)

    def rating_stats(self, book_id: str) -> RatingStats:
        """Average, count and 1-5 distribution of a book's review ratings."""
        with self._lock:
            ratings = [r.rating for r in self._reviews if r.book_id == book_id]
        return calculate_rating_stats(book_id, ratings)

    # =========================================================================
    # Browsing
    # =========================================================================

    def genres(self) -> list[str]:
        """Distinct genre tags across all books, sorted ascending."""
        with self._lock:
            return sorted({tag for book in self._books.values() for tag in book.genre})

    def authors(self) -> list[str]:
        """Distinct authors, sorted ascending."""
        with self._lock:
            return sorted({book.author for book in self._books.values()})

    def books_by_genre(self, genre: str) -> list[Book]:
        """Books tagged exactly ``genre`` (case-sensitive), storage order."""
        with self._lock:
            return [book for book in self._books.values() if has_genre(book, genre)]

    def books_by_author(self, author: str) -> list[Book]:
        """Books whose author contains ``author``, ignoring case."""
        with self._lock:
            return [
                book for book in self._books.values() if author_contains(book, author)
            ]

    def search(self, query: str) -> list[Book]:
        """
        Free-text search across title, author and genre tags.

        Matching is a case-insensitive substring test. An empty query
        matches every book.
        """
        with self._lock:
            return [book for book in self._books.values() if matches_query(book, query)]

    # =========================================================================
    # Recommendations
    # =========================================================================

    def similar_books_scored(self, book_id: str, limit: int = 4) -> list[ScoredBook]:
        """Similar books with their scores; empty for an unknown book."""
        with self._lock:
            target = self._books.get(book_id)
            if target is None:
                return []
            return rank_similar(target, self._books.values(), limit)

    def similar_books(self, book_id: str, limit: int = 4) -> list[Book]:
        """
        Books most similar to ``book_id``.

        Score is the number of shared genre tags plus 2 for the same author.
        The book itself and zero-score books are excluded; ties keep storage
        order.
        """
        return [item.book for item in self.similar_books_scored(book_id, limit)]

    def featured_books(self, limit: int = 5) -> list[Book]:
        """Highest rated books first."""
        with self._lock:
            return top_rated(self._books.values(), limit)

    def recent_books(self, limit: int = 5) -> list[Book]:
        """Most recently published books first."""
        with self._lock:
            return most_recent(self._books.values(), limit)
