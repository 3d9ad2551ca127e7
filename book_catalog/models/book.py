"""
Book Model

A catalog entry. ``genre`` is an ordered tuple of tags: insertion order is
display order and duplicate tags are kept as given.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Book:
    """
    A book in the catalog.

    Attributes:
        id: Opaque unique identifier assigned by the store
        title: Book title
        author: Author name, compared exactly for similarity
        genre: Ordered genre tags
        description: Free text, may be empty
        cover_image: Cover URI (not validated)
        rating: Average review rating rounded to one decimal, None until rated
        publication_year: Optional year of publication
    """

    id: str
    title: str
    author: str
    genre: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    cover_image: str = ""
    rating: float | None = None
    publication_year: int | None = None
