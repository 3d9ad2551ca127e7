"""
Services Package

Pure functions behind the catalog store's queries. They take books and
reviews as arguments and hold no state, so they can be tested in isolation.

Current services:
- ratings.py: Average rating and rating distribution calculations
- recommendations.py: Similar-book scoring plus featured and recent lists
- search.py: Genre, author and free-text match predicates
"""
