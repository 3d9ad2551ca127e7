"""
API Routers Package

FastAPI routers grouped by resource.

Router Structure:
- books.py: /api/v1/books/* endpoints
- reviews.py: /api/v1/books/{book_id}/reviews and /rating
- recommendations.py: featured, recent and similar books
- genres.py: /api/v1/genres/* endpoints
- authors.py: /api/v1/authors/* endpoints
- search.py: /api/v1/search

Each router is imported and registered in main.py.
"""

from book_catalog.routers.authors import router as authors_router
from book_catalog.routers.books import router as books_router
from book_catalog.routers.genres import router as genres_router
from book_catalog.routers.recommendations import router as recommendations_router
from book_catalog.routers.reviews import router as reviews_router
from book_catalog.routers.search import router as search_router

__all__ = [
    "books_router",
    "reviews_router",
    "recommendations_router",
    "genres_router",
    "authors_router",
    "search_router",
]
