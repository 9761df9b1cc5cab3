"""Catalog view: fetch cycle, view state and client-side filtering."""
import dataclasses
import enum
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from bookcatalog.async_client import AsyncGoogleBooksClient
from bookcatalog.client import GoogleBooksClient
from bookcatalog.config import Config
from bookcatalog.models import Book
from bookcatalog.parse import build_catalog, MAX_CATALOG_SIZE

logger = logging.getLogger(__name__)

ALL_GENRES = "All"
DEFAULT_TOPICS = ("fiction", "science", "programming")
DEFAULT_RESULTS_PER_TOPIC = 20
FETCH_ERROR_MESSAGE = "Failed to fetch books. Please try again later."


class Phase(enum.Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class CatalogState:
    """Everything the view shows; replaced wholesale on every change."""
    phase: Phase = Phase.LOADING
    books: Tuple[Book, ...] = ()
    error: Optional[str] = None
    search_text: str = ""
    genre: str = ALL_GENRES


def apply_filter(books: Iterable[Book], search_text: str, genre: str) -> List[Book]:
    """
    Filter books by free-text search and genre.

    A book is kept when the trimmed, case-insensitive search text is empty
    or found in its title, author or genre, and the genre selection is
    "All" or found in its genre. Input order is preserved.
    """
    term = (search_text or "").strip().lower()
    genre_term = (genre or ALL_GENRES).lower()
    any_genre = genre == ALL_GENRES or not genre

    results = []
    for book in books:
        if term and not (
            term in book.title.lower()
            or term in book.author.lower()
            or term in book.genre.lower()
        ):
            continue
        if not any_genre and genre_term not in book.genre.lower():
            continue
        results.append(book)
    return results


def derive_genres(books: Iterable[Book]) -> List[str]:
    """The "All" sentinel, then distinct non-empty genres in first-seen order."""
    genres = [ALL_GENRES]
    seen = set()
    for book in books:
        if book.genre and book.genre not in seen:
            seen.add(book.genre)
            genres.append(book.genre)
    return genres


class CatalogView:
    """
    Owns the catalog state for one session.

    A fetch cycle moves the view from LOADING to READY or ERROR and
    replaces the book list wholesale. Search text and genre changes
    only touch the filter selections; the filtered list is derived
    from the current state on every read.
    """

    def __init__(
        self,
        topics: Sequence[str] = DEFAULT_TOPICS,
        results_per_topic: int = DEFAULT_RESULTS_PER_TOPIC,
        max_books: int = MAX_CATALOG_SIZE,
        rng: Optional[random.Random] = None
    ):
        self.topics = list(topics)
        self.results_per_topic = results_per_topic
        self.max_books = max_books
        self.rng = rng or random.Random()
        self._state = CatalogState()

    @classmethod
    def from_config(cls, config: Config) -> "CatalogView":
        return cls(
            topics=config.topics,
            results_per_topic=config.CATALOG_RESULTS_PER_TOPIC,
            max_books=config.CATALOG_MAX_BOOKS,
            rng=random.Random(config.CATALOG_RATING_SEED),
        )

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def books(self) -> Tuple[Book, ...]:
        """The canonical set from the last successful fetch."""
        return self._state.books

    @property
    def filtered_books(self) -> List[Book]:
        return apply_filter(self._state.books, self._state.search_text, self._state.genre)

    @property
    def genres(self) -> List[str]:
        return derive_genres(self._state.books)

    def set_search_text(self, search_text: str):
        self._update(search_text=search_text)

    def set_genre(self, genre: str):
        self._update(genre=genre or ALL_GENRES)

    async def fetch_catalog(self, client: AsyncGoogleBooksClient) -> CatalogState:
        """
        Run one fetch cycle with all topic queries in flight at once.

        The cycle succeeds only if every query returns a parseable
        response; otherwise the view ends in the error phase with no books.
        """
        self._begin_fetch()
        try:
            responses = await client.search_multiple(self.topics, self.results_per_topic)
        except Exception as e:
            logger.error(f"Catalog fetch failed: {e}", exc_info=True)
            return self._fail()
        return self._publish(responses)

    def fetch_catalog_sync(self, client: GoogleBooksClient) -> CatalogState:
        """Blocking variant of fetch_catalog; queries run one after another."""
        self._begin_fetch()
        try:
            responses = client.search_multiple(self.topics, self.results_per_topic)
        except Exception as e:
            logger.error(f"Catalog fetch failed: {e}", exc_info=True)
            return self._fail()
        return self._publish(responses)

    def _begin_fetch(self):
        logger.info(f"Fetching catalog for topics: {', '.join(self.topics)}")
        self._update(phase=Phase.LOADING, books=(), error=None)

    def _publish(self, responses: List[Optional[Dict[str, Any]]]) -> CatalogState:
        failed = [topic for topic, response in zip(self.topics, responses) if response is None]
        if failed:
            logger.error(f"Fetch failed for topics: {', '.join(failed)}")
            return self._fail()

        try:
            books = build_catalog(responses, limit=self.max_books, rng=self.rng)
        except ValueError as e:
            logger.error(f"Malformed catalog response: {e}")
            return self._fail()

        logger.info(f"Loaded {len(books)} books")
        self._update(phase=Phase.READY, books=tuple(books), error=None)
        return self._state

    def _fail(self) -> CatalogState:
        self._update(phase=Phase.ERROR, books=(), error=FETCH_ERROR_MESSAGE)
        return self._state

    def _update(self, **changes):
        self._state = dataclasses.replace(self._state, **changes)
