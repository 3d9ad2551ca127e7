"""
Recommendations Service

Provides book recommendations for the catalog:
1. Content-based: books similar to a given book by genre and author
2. Featured: highest rated books
3. Recent: most recently published books

Similarity score:
    score = |genres(target) & genres(candidate)| + AUTHOR_MATCH_BONUS if same author

Genre overlap counts each shared tag once, compares tags exactly (case
matters) and is not normalized by genre-set size. Only candidates scoring
above zero are recommended.

All rankings use Python's stable sort, so books with equal scores keep their
storage order.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from book_catalog.models import Book

logger = logging.getLogger(__name__)

AUTHOR_MATCH_BONUS = 2


@dataclass(frozen=True)
class ScoredBook:
    """A recommended book with its similarity score and reasons."""

    book: Book
    score: int
    reasons: list[str] = field(default_factory=list)


# =============================================================================
# Content-Based Recommendations
# =============================================================================


def shared_genres(target: Book, candidate: Book) -> set[str]:
    """Distinct genre tags present on both books."""
    return set(target.genre) & set(candidate.genre)


def similarity_score(target: Book, candidate: Book) -> int:
    """
    Score how similar ``candidate`` is to ``target``.

    Args:
        target: The book recommendations are made for
        candidate: Another book in the catalog

    Returns:
        Number of shared genre tags, plus the author bonus when both
        books have exactly the same author
    """
    score = len(shared_genres(target, candidate))
    if candidate.author == target.author:
        score += AUTHOR_MATCH_BONUS
    return score


def _reasons(target: Book, candidate: Book) -> list[str]:
    reasons = []
    genre_matches = len(shared_genres(target, candidate))
    if genre_matches:
        reasons.append(f"Shares {genre_matches} genre(s)")
    if candidate.author == target.author:
        reasons.append("Same author")
    return reasons


def rank_similar(
    target: Book,
    books: Iterable[Book],
    limit: int = 4,
) -> list[ScoredBook]:
    """
    Rank books by similarity to a target book.

    Algorithm:
    1. Score every book other than the target
    2. Drop books scoring zero or less
    3. Sort by score descending, keeping storage order among ties
    4. Keep the first ``limit`` results

    Args:
        target: Book to find similar books for
        books: All catalog books in storage order (may include the target)
        limit: Maximum number of recommendations

    Returns:
        Scored books, best match first
    """
    scored = []
    for candidate in books:
        if candidate.id == target.id:
            continue
        score = similarity_score(target, candidate)
        if score <= 0:
            continue
        scored.append(
            ScoredBook(book=candidate, score=score, reasons=_reasons(target, candidate))
        )

    scored.sort(key=lambda item: item.score, reverse=True)
    logger.debug(
        f"Found {len(scored)} similar book(s) for book {target.id}, limit {limit}"
    )
    return scored[:max(limit, 0)]


# =============================================================================
# Featured & Recent
# =============================================================================


def top_rated(books: Iterable[Book], limit: int = 5) -> list[Book]:
    """Books by rating, highest first; unrated books count as 0."""
    ranked = sorted(
        books,
        key=lambda book: book.rating if book.rating is not None else 0.0,
        reverse=True,
    )
    return ranked[:max(limit, 0)]


def most_recent(books: Iterable[Book], limit: int = 5) -> list[Book]:
    """Books by publication year, newest first; unknown years count as 0."""
    ranked = sorted(
        books,
        key=lambda book: book.publication_year or 0,
        reverse=True,
    )
    return ranked[:max(limit, 0)]
