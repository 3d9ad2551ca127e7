"""
Search Service

Match predicates for browsing and free-text search.

- Genre filter: exact, case-sensitive tag match
- Author filter: case-insensitive substring of the author name
- Free-text search: case-insensitive substring of the title, the author
  or any genre tag

An empty query is a substring of everything, so ``matches_query(book, "")``
is always True. Callers that want "no filter" semantics skip the search.
"""

from book_catalog.models import Book


def has_genre(book: Book, genre: str) -> bool:
    """True if one of the book's tags equals ``genre`` exactly."""
    return genre in book.genre


def author_contains(book: Book, author: str) -> bool:
    """True if ``author`` appears in the book's author, ignoring case."""
    return author.lower() in book.author.lower()


def matches_query(book: Book, query: str) -> bool:
    """
    Check whether a book matches a free-text query.

    Args:
        book: Book to test
        query: Search text

    Returns:
        True if the lowercased query occurs in the lowercased title,
        author, or any genre tag
    """
    needle = query.lower()
    return (
        needle in book.title.lower()
        or needle in book.author.lower()
        or any(needle in tag.lower() for tag in book.genre)
    )
