"""Data models for books."""
import math
from dataclasses import dataclass, asdict
from typing import Dict, Any

# Fallbacks substituted when the catalog omits a field
UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_AUTHOR = "Unknown Author"
DEFAULT_GENRE = "General"
NO_DESCRIPTION = "No description available"
PLACEHOLDER_IMAGE = "https://via.placeholder.com/150x200?text=No+Image"
UNKNOWN_DATE = "Unknown"

MAX_RATING = 5
DESCRIPTION_LIMIT = 150


@dataclass(frozen=True)
class Book:
    """Normalized book representation."""
    id: str
    title: str
    author: str
    genre: str
    rating: float
    description: str
    image_url: str
    published_date: str

    @property
    def stars(self) -> str:
        """Render the rating as filled/empty star glyphs out of 5."""
        filled = max(0, min(MAX_RATING, math.floor(self.rating)))
        return "★" * filled + "☆" * (MAX_RATING - filled)

    @property
    def short_description(self) -> str:
        """Description cut to 150 characters with an ellipsis."""
        if len(self.description) > DESCRIPTION_LIMIT:
            return self.description[:DESCRIPTION_LIMIT] + "..."
        return self.description

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of all fields, for JSON output."""
        return asdict(self)
