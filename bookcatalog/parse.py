"""Parse and normalize Google Books API responses."""
import logging
import random
from typing import Dict, Any, Iterable, List, Optional

from bookcatalog.models import (
    Book,
    DEFAULT_GENRE,
    MAX_RATING,
    NO_DESCRIPTION,
    PLACEHOLDER_IMAGE,
    UNKNOWN_AUTHOR,
    UNKNOWN_DATE,
    UNKNOWN_TITLE,
)

logger = logging.getLogger(__name__)

MAX_CATALOG_SIZE = 30

# Range of the rating synthesized for records without averageRating
SYNTHETIC_RATING_MIN = 3
SYNTHETIC_RATING_MAX = 5


def _as_object(value: Any, name: str) -> Dict[str, Any]:
    """Return value as a dict, treating None as empty; reject anything else."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Expected '{name}' to be an object, got {type(value).__name__}")
    return value


def _first(values: Any) -> Optional[str]:
    """First non-empty string of a list field such as authors or categories."""
    if isinstance(values, str):
        return values or None
    if isinstance(values, list):
        for value in values:
            if isinstance(value, str) and value:
                return value
    return None


def _rating(raw: Any, rng: random.Random) -> float:
    # bool is an int subclass but never a rating
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(max(0, min(MAX_RATING, raw)))
    return float(rng.randint(SYNTHETIC_RATING_MIN, SYNTHETIC_RATING_MAX))


def parse_book(item: Dict[str, Any], rng: Optional[random.Random] = None) -> Optional[Book]:
    """
    Parse a single book item from Google Books API.

    Args:
        item: Single item from Google Books API response
        rng: Source of synthesized ratings (a fresh Random if omitted)

    Returns:
        Book object, or None if the item has no id

    Raises:
        ValueError: If the item or its nested objects are not JSON objects
    """
    rng = rng or random.Random()
    item = _as_object(item, "item")

    book_id = item.get("id")
    if not book_id:
        logger.warning("Skipping record without id")
        return None

    volume_info = _as_object(item.get("volumeInfo"), "volumeInfo")
    image_links = _as_object(volume_info.get("imageLinks"), "imageLinks")

    return Book(
        id=str(book_id),
        title=str(volume_info.get("title") or UNKNOWN_TITLE),
        author=_first(volume_info.get("authors")) or UNKNOWN_AUTHOR,
        genre=_first(volume_info.get("categories")) or DEFAULT_GENRE,
        rating=_rating(volume_info.get("averageRating"), rng),
        description=str(volume_info.get("description") or NO_DESCRIPTION),
        image_url=str(image_links.get("thumbnail") or PLACEHOLDER_IMAGE),
        published_date=str(volume_info.get("publishedDate") or UNKNOWN_DATE),
    )


def parse_books_response(
    response_json: Dict[str, Any],
    rng: Optional[random.Random] = None
) -> List[Book]:
    """
    Parse full Google Books API response.

    Args:
        response_json: Complete API response JSON
        rng: Source of synthesized ratings

    Returns:
        List of Book objects (empty if no items found)

    Raises:
        ValueError: If the response does not have the expected structure
    """
    if not isinstance(response_json, dict):
        raise ValueError(f"Expected response object, got {type(response_json).__name__}")

    items = response_json.get("items") or []
    if not isinstance(items, list):
        raise ValueError(f"Expected 'items' to be a list, got {type(items).__name__}")

    rng = rng or random.Random()
    books = []

    for item in items:
        book = parse_book(item, rng)
        if book:
            books.append(book)

    return books


def deduplicate_books(books: Iterable[Book]) -> List[Book]:
    """
    Remove duplicate books by ID, keeping the first occurrence.

    Args:
        books: Book objects in priority order

    Returns:
        Deduplicated list of books
    """
    seen_ids = set()
    unique_books = []

    for book in books:
        if book.id not in seen_ids:
            seen_ids.add(book.id)
            unique_books.append(book)

    return unique_books


def build_catalog(
    responses: Iterable[Dict[str, Any]],
    limit: int = MAX_CATALOG_SIZE,
    rng: Optional[random.Random] = None
) -> List[Book]:
    """
    Merge several search responses into one catalog.

    Responses are flattened in the given order, deduplicated by id and
    truncated to ``limit`` books.

    Raises:
        ValueError: If any response is malformed
    """
    rng = rng or random.Random()
    all_books: List[Book] = []
    for response in responses:
        all_books.extend(parse_books_response(response, rng))

    return deduplicate_books(all_books)[:limit]
