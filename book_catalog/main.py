"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Tests can build their own instances

2. Lifespan Events
   - startup: create the catalog store (seeded with sample data if enabled)
   - shutdown: log and release the store

3. Middleware Stack
   - CORS: Allow the browser front-end to call the API

4. Exception Handlers
   - Catch-all handler hides internal errors outside debug mode and always
     in production
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from book_catalog import __version__
from book_catalog.config import get_settings
from book_catalog.routers import (
    authors_router,
    books_router,
    genres_router,
    recommendations_router,
    reviews_router,
    search_router,
)
from book_catalog.sample_data import create_sample_store
from book_catalog.store import CatalogStore

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.

    The catalog lives only as long as the process: a fresh store is created
    here and kept on ``app.state.store`` for the dependencies to find.
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API version: {settings.api_version}")

    if settings.seed_sample_data:
        app.state.store = create_sample_store()
        logger.info(
            f"Catalog seeded with {app.state.store.book_count()} books "
            f"and {app.state.store.review_count()} reviews"
        )
    else:
        app.state.store = CatalogStore()
        logger.info("Catalog started empty")

    yield

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    app.state.store = None


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

Browse a book catalog, read and write reviews, and discover related books.

### Features
- **Books**: List, filter by genre or author, add books
- **Reviews**: Star-rated reviews with live average ratings
- **Search**: Case-insensitive search over title, author and genre
- **Recommendations**: Similar, featured and recent books

All data is kept in memory and resets when the server restarts.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        Error details are returned only in debug mode, and never in the
        production environment even when debug is switched on.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug and not settings.is_production:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    api_prefix = f"/api/{settings.api_version}"

    # Recommendations router must come before books router
    # so that /books/featured and /books/recent match before /books/{book_id}
    app.include_router(recommendations_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)
    app.include_router(reviews_router, prefix=api_prefix)
    app.include_router(genres_router, prefix=api_prefix)
    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(search_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check(request: Request) -> dict:
        """Health check endpoint with catalog sizes."""
        store: CatalogStore | None = getattr(request.app.state, "store", None)
        return {
            "status": "healthy" if store is not None else "starting",
            "app": settings.app_name,
            "version": settings.api_version,
            "catalog": {
                "books": store.book_count() if store else 0,
                "reviews": store.review_count() if store else 0,
                "seeded": settings.seed_sample_data,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn book_catalog.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m book_catalog.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "book_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
