"""
Book Catalog API Application Package

An in-memory book catalog with reviews, ratings, search and recommendations.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- store.py: CatalogStore, the in-memory owner of books and reviews
- sample_data.py: Books and reviews seeded at startup
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: Immutable Book and Review records
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Rating, search and recommendation logic
"""

__version__ = "0.1.0"
