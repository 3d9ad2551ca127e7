"""
Domain Models Package

Immutable records held by the catalog store.

Unlike the Pydantic schemas (request/response shapes), these are the values
the store owns. They are frozen dataclasses: a change such as a new average
rating produces a replacement record rather than mutating a shared one.
"""

from book_catalog.models.book import Book
from book_catalog.models.review import Review

__all__ = ["Book", "Review"]
