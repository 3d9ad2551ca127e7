"""
Review Model

A reader's star rating of a book, with an optional comment.

Business Rules:
- Rating is an integer from 1 to 5
- ``date`` is set by the store when the review is added and never changes
- ``book_id`` is not enforced as a foreign key; a review for an unknown
  book is kept as an orphan
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class Review:
    """
    A review of a book.

    Attributes:
        id: Opaque unique identifier assigned by the store
        book_id: ID of the reviewed book
        username: Display name of the reviewer
        rating: 1-5 star rating
        comment: Review text, may be empty
        date: When the review was added (UTC)
    """

    id: str
    book_id: str
    username: str
    rating: int
    comment: str = ""
    date: datetime = field(default_factory=lambda: datetime.now(UTC))
