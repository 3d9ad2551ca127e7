"""
Tests for Authors API Endpoints

Tests for /api/v1/authors endpoints.
"""

from fastapi import status


class TestListAuthors:
    """Tests for GET /api/v1/authors/ endpoint."""

    def test_list_authors_empty(self, empty_client):
        response = empty_client.get("/api/v1/authors/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_authors(self, client):
        response = client.get("/api/v1/authors/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            "F. Scott Fitzgerald",
            "George Orwell",
            "Harper Lee",
            "J.K. Rowling",
            "J.R.R. Tolkien",
            "Jane Austen",
        ]

    def test_authors_are_distinct(self, client, book_payload):
        book_payload["author"] = "George Orwell"
        client.post("/api/v1/books/", json=book_payload)

        response = client.get("/api/v1/authors/")

        assert response.json().count("George Orwell") == 1


class TestAuthorBooks:
    """Tests for GET /api/v1/authors/{author}/books endpoint."""

    def test_author_books_full_name(self, client):
        response = client.get("/api/v1/authors/Jane%20Austen/books")

        assert response.status_code == status.HTTP_200_OK
        assert [b["id"] for b in response.json()] == ["1"]

    def test_author_books_partial_case_insensitive(self, client):
        response = client.get("/api/v1/authors/ROW/books")

        assert [b["id"] for b in response.json()] == ["6"]

    def test_author_books_no_match(self, client):
        response = client.get("/api/v1/authors/Dickens/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []
