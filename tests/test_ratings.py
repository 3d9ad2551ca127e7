"""
Tests for the Ratings Service

Average rating rounding and rating distribution.
"""

import pytest

from book_catalog.services.ratings import (
    average_rating,
    calculate_rating_stats,
    rating_distribution,
)


class TestAverageRating:
    """Tests for average_rating."""

    def test_no_ratings(self):
        assert average_rating([]) is None

    def test_single_rating(self):
        assert average_rating([4]) == 4.0

    def test_accepts_generators(self):
        assert average_rating(r for r in (5, 4)) == 4.5

    @pytest.mark.parametrize(
        "ratings, expected",
        [
            ([5, 4, 3], 4.0),
            ([2, 3, 3], 2.7),
            ([1, 2, 2, 2], 1.8),
            ([3, 3, 3, 4], 3.3),
            ([4, 4, 5, 4], 4.3),
            ([5] * 7 + [4] * 13, 4.3),
            ([5] * 3 + [4] * 17, 4.2),
        ],
    )
    def test_rounds_half_up_to_one_decimal(self, ratings, expected):
        assert average_rating(ratings) == expected


class TestRatingDistribution:
    """Tests for rating_distribution."""

    def test_empty(self):
        assert rating_distribution([]) == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}

    def test_counts(self):
        assert rating_distribution([5, 5, 1, 3]) == {1: 1, 2: 0, 3: 1, 4: 0, 5: 2}


class TestRatingStats:
    """Tests for calculate_rating_stats."""

    def test_stats(self):
        stats = calculate_rating_stats("7", [2, 4])

        assert stats.book_id == "7"
        assert stats.average_rating == 3.0
        assert stats.total_reviews == 2
        assert stats.rating_distribution[2] == 1
        assert stats.rating_distribution[4] == 1

    def test_stats_without_reviews(self):
        stats = calculate_rating_stats("7", [])

        assert stats.average_rating is None
        assert stats.total_reviews == 0
