"""
Sample Catalog Data

Books and reviews loaded into the store at startup when
``SEED_SAMPLE_DATA`` is enabled (the default).

The records are loaded as they are: the books keep their preset ratings and
the reviews keep their original dates.
"""

from datetime import UTC, datetime

from book_catalog.models import Book, Review
from book_catalog.store import CatalogStore

SAMPLE_BOOKS: tuple[Book, ...] = (
    Book(
        id="1",
        title="Pride and Prejudice",
        author="Jane Austen",
        genre=("Classic", "Romance"),
        description=(
            "Pride and Prejudice follows the turbulent relationship between "
            "Elizabeth Bennet, the daughter of a country gentleman, and "
            "Fitzwilliam Darcy, a rich aristocratic landowner. They must "
            "overcome the titular sins of pride and prejudice in order to "
            "fall in love and marry."
        ),
        cover_image=(
            "https://images.unsplash.com/photo-1544947950-fa07a98d237f"
            "?q=80&w=1000&auto=format&fit=crop"
        ),
        rating=4.5,
        publication_year=1813,
    ),
    Book(
        id="2",
        title="To Kill a Mockingbird",
        author="Harper Lee",
        genre=("Classic", "Historical Fiction"),
        description=(
            "To Kill a Mockingbird is a novel by Harper Lee published in 1960. "
            "It was immediately successful, winning the Pulitzer Prize, and "
            "has become a classic of modern American literature."
        ),
        cover_image=(
            "https://images.unsplash.com/photo-1541963463532-d68292c34b19"
            "?q=80&w=1000&auto=format&fit=crop"
        ),
        rating=4.8,
        publication_year=1960,
    ),
    Book(
        id="3",
        title="The Great Gatsby",
        author="F. Scott Fitzgerald",
        genre=("Classic", "Fiction"),
        description=(
            "The Great Gatsby is a 1925 novel by American writer F. Scott "
            "Fitzgerald. Set in the Jazz Age on Long Island, the novel depicts "
            "narrator Nick Carraway's interactions with mysterious millionaire "
            "Jay Gatsby and Gatsby's obsession to reunite with his former "
            "lover, Daisy Buchanan."
        ),
        cover_image=(
            "https://images.unsplash.com/photo-1543002588-bfa74002ed7e"
            "?q=80&w=1000&auto=format&fit=crop"
        ),
        rating=4.2,
        publication_year=1925,
    ),
    Book(
        id="4",
        title="1984",
        author="George Orwell",
        genre=("Dystopian", "Science Fiction"),
        description=(
            "1984 is a dystopian novel by English novelist George Orwell. It "
            "was published on 8 June 1949 as Orwell's ninth and final book "
            "completed in his lifetime."
        ),
        cover_image=(
            "https://images.unsplash.com/photo-1532012197267-da84d127e765"
            "?q=80&w=1000&auto=format&fit=crop"
        ),
        rating=4.6,
        publication_year=1949,
    ),
    Book(
        id="5",
        title="The Hobbit",
        author="J.R.R. Tolkien",
        genre=("Fantasy", "Adventure"),
        description=(
            "The Hobbit, or There and Back Again is a children's fantasy novel "
            "by English author J. R. R. Tolkien. It was published on 21 "
            "September 1937 to wide critical acclaim, being nominated for the "
            "Carnegie Medal and awarded a prize from the New York Herald "
            "Tribune for best juvenile fiction."
        ),
        cover_image=(
            "https://images.unsplash.com/photo-1629992101753-56d196c8aabb"
            "?q=80&w=1000&auto=format&fit=crop"
        ),
        rating=4.7,
        publication_year=1937,
    ),
    Book(
        id="6",
        title="Harry Potter and the Philosopher's Stone",
        author="J.K. Rowling",
        genre=("Fantasy", "Young Adult"),
        description=(
            "Harry Potter and the Philosopher's Stone is a fantasy novel "
            "written by British author J. K. Rowling. The first novel in the "
            "Harry Potter series and Rowling's debut novel, it follows Harry "
            "Potter, a young wizard who discovers his magical heritage on his "
            "eleventh birthday."
        ),
        cover_image=(
            "https://images.unsplash.com/photo-1626618012641-bfbca5a31239"
            "?q=80&w=1000&auto=format&fit=crop"
        ),
        rating=4.7,
        publication_year=1997,
    ),
)

SAMPLE_REVIEWS: tuple[Review, ...] = (
    Review(
        id="1",
        book_id="1",
        username="BookLover42",
        rating=5,
        comment=(
            "A timeless classic that never gets old. Elizabeth Bennet is one "
            "of the most relatable characters in literature."
        ),
        date=datetime(2023, 1, 15, tzinfo=UTC),
    ),
    Review(
        id="2",
        book_id="1",
        username="LiteraryFan",
        rating=4,
        comment="Jane Austen's wit and social commentary shine through in this novel.",
        date=datetime(2023, 2, 20, tzinfo=UTC),
    ),
    Review(
        id="3",
        book_id="2",
        username="ClassicReader",
        rating=5,
        comment=(
            "This book changed my perspective on so many things. "
            "A must-read for everyone."
        ),
        date=datetime(2023, 3, 10, tzinfo=UTC),
    ),
)


def create_sample_store() -> CatalogStore:
    """Create a store preloaded with the sample books and reviews."""
    return CatalogStore(books=SAMPLE_BOOKS, reviews=SAMPLE_REVIEWS)
