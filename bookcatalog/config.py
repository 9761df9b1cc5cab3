"""Configuration management."""
import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Application configuration."""

    # API
    GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY")

    # Catalog
    CATALOG_TOPICS = os.getenv("CATALOG_TOPICS", "fiction,science,programming")
    CATALOG_RESULTS_PER_TOPIC = int(os.getenv("CATALOG_RESULTS_PER_TOPIC", "20"))
    CATALOG_MAX_BOOKS = int(os.getenv("CATALOG_MAX_BOOKS", "30"))
    CATALOG_RATING_SEED = _optional_int("CATALOG_RATING_SEED")

    # Request timeout (none unless configured)
    CATALOG_TIMEOUT = _optional_float("CATALOG_TIMEOUT")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @property
    def topics(self) -> List[str]:
        """Search topics as a list, blanks dropped."""
        return [topic.strip() for topic in self.CATALOG_TOPICS.split(",") if topic.strip()]
