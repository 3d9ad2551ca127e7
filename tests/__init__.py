"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (stores, test client)
- test_store.py: CatalogStore operations
- test_ratings.py: Rating aggregation service
- test_recommendations.py: Similarity scoring and recommendation endpoints
- test_books.py: /api/v1/books endpoints
- test_reviews.py: Review and rating endpoints
- test_genres.py / test_authors.py / test_search.py: Browse endpoints
- test_main.py: Health, root and configuration

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_store.py

    # Run with verbose output
    pytest -v
"""
