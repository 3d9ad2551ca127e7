"""
Review Pydantic Schemas

Schemas for book reviews with ratings.

Schemas:
- ReviewCreate: Submit a new review
- ReviewResponse: Review data for API responses
- BookRatingStats: Aggregated ratings for a book

Business Rules:
- Rating must be 1-5 (validated at schema level)
- Username is required and cannot be blank
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewBase(BaseModel):
    """Base schema with shared review fields."""

    username: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Name shown with the review",
        examples=["BookLover42"],
    )

    rating: int = Field(
        ...,
        ge=1,
        le=5,
        description="Rating from 1 to 5 stars",
        examples=[4, 5],
    )

    comment: str = Field(
        default="",
        max_length=5000,
        description="Review text",
        examples=["A timeless classic that never gets old."],
    )


class ReviewCreate(ReviewBase):
    """
    Schema for submitting a review.

    The book comes from the URL path; id and date are assigned on insert.

    Example request body:
    {
        "username": "BookLover42",
        "rating": 5,
        "comment": "A timeless classic."
    }
    """

    @field_validator("username")
    @classmethod
    def username_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize username."""
        if not v.strip():
            raise ValueError("Username cannot be empty or whitespace")
        return v.strip()

    @field_validator("comment", mode="before")
    @classmethod
    def comment_defaults_to_empty(cls, v: str | None) -> str:
        """Treat a null comment as an empty one."""
        return "" if v is None else v


class ReviewResponse(ReviewBase):
    """Schema for review responses."""

    id: str = Field(..., description="Unique review identifier")
    book_id: str = Field(..., description="ID of the reviewed book")
    date: datetime = Field(..., description="When the review was added")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "book_id": "1",
                "username": "BookLover42",
                "rating": 5,
                "comment": "A timeless classic that never gets old.",
                "date": "2023-01-15T00:00:00Z",
            }
        },
    )


class BookRatingStats(BaseModel):
    """
    Aggregated rating statistics for a book.

    Used to show average rating, review count and star distribution.
    """

    book_id: str = Field(..., description="Book ID")
    average_rating: float | None = Field(
        default=None,
        ge=0,
        le=5,
        description="Average of the book's reviews, null if there are none",
    )
    total_reviews: int = Field(..., ge=0, description="Total number of reviews")
    rating_distribution: dict[int, int] = Field(
        default_factory=lambda: {1: 0, 2: 0, 3: 0, 4: 0, 5: 0},
        description="Count of each rating (1-5)",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "book_id": "1",
                "average_rating": 4.5,
                "total_reviews": 2,
                "rating_distribution": {"1": 0, "2": 0, "3": 0, "4": 1, "5": 1},
            }
        },
    )
