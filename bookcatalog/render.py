"""Terminal rendering for the catalog view."""
import json
from typing import List

from tabulate import tabulate

from bookcatalog.models import Book
from bookcatalog.view import CatalogView, Phase

LOADING_MESSAGE = "Loading books..."
EMPTY_MESSAGE = (
    "No books found matching your criteria.\n"
    "Try adjusting your search or filter."
)
FORMATS = ("table", "json", "compact")


def count_line(count: int) -> str:
    """Summary line such as "1 book found" or "3 books found"."""
    return f"{count} {'book' if count == 1 else 'books'} found"


def render_books(books: List[Book], format_type: str = "table") -> str:
    """Render a list of books in the given format."""
    if format_type == "json":
        return json.dumps([book.to_dict() for book in books], indent=2, ensure_ascii=False)

    if not books:
        return EMPTY_MESSAGE

    if format_type == "compact":
        return "\n".join(
            f"{i}. {book.title} - {book.author} [{book.genre}] {book.stars}"
            for i, book in enumerate(books, 1)
        )

    headers = ["Title", "Author", "Genre", "Rating", "Description", "Published"]
    rows = [
        [
            book.title,
            f"by {book.author}",
            book.genre,
            f"{book.stars} ({book.rating:g})",
            book.short_description,
            book.published_date,
        ]
        for book in books
    ]
    # Wrap long cells so each book stays a readable card
    return tabulate(
        rows,
        headers=headers,
        tablefmt="grid",
        maxcolwidths=[30, 20, 20, None, 50, 12],
    )


def render_genres(genres: List[str]) -> str:
    """One genre per line."""
    return "\n".join(genres)


def render_view(view: CatalogView, format_type: str = "table") -> str:
    """Render whatever the view's current phase calls for."""
    state = view.state
    if state.phase is Phase.LOADING:
        return LOADING_MESSAGE
    if state.phase is Phase.ERROR:
        return state.error or ""

    books = view.filtered_books
    if format_type == "json":
        return render_books(books, format_type)
    return count_line(len(books)) + "\n\n" + render_books(books, format_type)
