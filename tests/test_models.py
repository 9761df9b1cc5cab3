"""Tests for the Book model."""
import dataclasses

import pytest

from bookcatalog.models import Book


def make_book(rating=4.0, description="Short"):
    return Book("id1", "Title", "Author", "Fiction", rating, description, "img", "2001")


def test_stars_floor_rating():
    """Test that stars show floor(rating) filled stars out of 5."""
    assert make_book(3.7).stars == "★★★☆☆"
    assert make_book(5).stars == "★★★★★"
    assert make_book(0).stars == "☆☆☆☆☆"


def test_short_description_truncates_at_150():
    """Test description truncation with ellipsis."""
    long_text = "x" * 200
    assert make_book(description=long_text).short_description == "x" * 150 + "..."
    assert make_book(description="x" * 150).short_description == "x" * 150


def test_book_is_immutable():
    """Test that books cannot be changed field by field."""
    book = make_book()
    with pytest.raises(dataclasses.FrozenInstanceError):
        book.title = "Other"


def test_to_dict():
    """Test conversion to a JSON-friendly dict."""
    data = make_book().to_dict()
    assert data["id"] == "id1"
    assert data["image_url"] == "img"
    assert data["published_date"] == "2001"
