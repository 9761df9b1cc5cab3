"""Tests for terminal rendering."""
import json
from unittest.mock import MagicMock

from bookcatalog.models import Book
from bookcatalog.render import (
    EMPTY_MESSAGE,
    LOADING_MESSAGE,
    count_line,
    render_books,
    render_genres,
    render_view,
)
from bookcatalog.view import CatalogView, FETCH_ERROR_MESSAGE


def make_book(book_id="1", title="Dune", description="Spice."):
    return Book(book_id, title, "Frank Herbert", "Fiction", 4.6, description, "img", "1965")


def loaded_view(books):
    view = CatalogView()
    client = MagicMock()
    client.search_multiple.return_value = [
        {"items": [
            {"id": book.id, "volumeInfo": {
                "title": book.title,
                "authors": [book.author],
                "categories": [book.genre],
                "averageRating": book.rating,
                "description": book.description,
                "publishedDate": book.published_date,
            }}
            for book in books
        ]},
        {},
        {},
    ]
    view.fetch_catalog_sync(client)
    return view


def test_count_line_pluralizes():
    assert count_line(1) == "1 book found"
    assert count_line(0) == "0 books found"
    assert count_line(7) == "7 books found"


def test_table_shows_card_fields():
    """Test that the table carries title, author, genre, stars and date."""
    output = render_books([make_book()])

    assert "Dune" in output
    assert "by Frank Herbert" in output
    assert "Fiction" in output
    assert "★★★★☆ (4.6)" in output
    assert "1965" in output


def test_table_shows_description():
    assert "Spice." in render_books([make_book()])


def test_empty_state_message():
    assert render_books([]) == EMPTY_MESSAGE


def test_json_format():
    data = json.loads(render_books([make_book()], "json"))
    assert data[0]["title"] == "Dune"
    assert data[0]["rating"] == 4.6


def test_compact_format():
    output = render_books([make_book(), make_book("2", "Emma")], "compact")
    assert output.splitlines()[0] == "1. Dune - Frank Herbert [Fiction] ★★★★☆"
    assert output.splitlines()[1].startswith("2. Emma")


def test_render_genres():
    assert render_genres(["All", "Fiction"]) == "All\nFiction"


def test_render_view_loading():
    assert render_view(CatalogView()) == LOADING_MESSAGE


def test_render_view_error():
    view = CatalogView()
    client = MagicMock()
    client.search_multiple.return_value = [None, {}, {}]
    view.fetch_catalog_sync(client)

    assert render_view(view) == FETCH_ERROR_MESSAGE


def test_render_view_ready_uses_filter():
    view = loaded_view([make_book("1", "Dune"), make_book("2", "Emma")])
    view.set_search_text("emma")

    output = render_view(view, "compact")

    assert output.startswith("1 book found")
    assert "Emma" in output
    assert "Dune" not in output


def test_render_view_ready_empty_state():
    view = loaded_view([make_book()])
    view.set_search_text("nothing matches")

    output = render_view(view)

    assert output.startswith("0 books found")
    assert "No books found matching your criteria." in output
