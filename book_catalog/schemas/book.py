"""
Book Pydantic Schemas

Request and response shapes for books.

Required-field validation for new books lives here rather than in the
store: title, author and cover image must not be blank, and at least one
non-blank genre tag is required.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_required(v: str, field_name: str) -> str:
    if not v.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v.strip()


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Author name",
        examples=["George Orwell", "Jane Austen"],
    )

    genre: list[str] = Field(
        ...,
        min_length=1,
        description="Genre tags in display order",
        examples=[["Classic", "Romance"]],
    )

    description: str = Field(
        default="",
        max_length=5000,
        description="Book description or summary",
    )

    cover_image: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Cover image URL",
        examples=["https://example.com/covers/1984.jpg"],
    )

    publication_year: int | None = Field(
        default=None,
        ge=0,
        le=9999,
        description="Year of publication",
        examples=[1949, 1813],
    )


class BookCreate(BookBase):
    """
    Schema for adding a book.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell",
        "genre": ["Dystopian", "Science Fiction"],
        "cover_image": "https://example.com/covers/1984.jpg",
        "publication_year": 1949
    }
    """

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        return _strip_required(v, "Title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize author."""
        return _strip_required(v, "Author")

    @field_validator("cover_image")
    @classmethod
    def cover_image_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize cover image URL."""
        return _strip_required(v, "Cover image")

    @field_validator("genre")
    @classmethod
    def genres_must_not_be_empty(cls, v: list[str]) -> list[str]:
        """Strip every tag and reject blank ones."""
        tags = [tag.strip() for tag in v]
        if not tags or not all(tags):
            raise ValueError("Genre tags cannot be empty or whitespace")
        return tags

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str) -> str:
        return v.strip()


class BookResponse(BaseModel):
    """
    Schema for book responses.

    Fields carry no create-time constraints: the store keeps books exactly
    as they were added, and every stored book must be returnable.

    ``rating`` is the average of the book's reviews to one decimal place,
    or null if the book has not been rated.
    """

    id: str = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    genre: list[str] = Field(default_factory=list, description="Genre tags")
    description: str = Field(default="", description="Book description or summary")
    cover_image: str = Field(default="", description="Cover image URL")
    rating: float | None = Field(
        default=None,
        description="Average review rating, null if unrated",
    )
    publication_year: int | None = Field(
        default=None,
        description="Year of publication, negative for BC",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "4",
                "title": "1984",
                "author": "George Orwell",
                "genre": ["Dystopian", "Science Fiction"],
                "description": "A dystopian novel by George Orwell.",
                "cover_image": "https://example.com/covers/1984.jpg",
                "rating": 4.6,
                "publication_year": 1949,
            }
        },
    )
