"""
Media models for quickadd-tmdb.
"""

from enum import Enum
from typing import Any, Dict


class MediaType(str, Enum):
    """Kind of title to search for; the value is the TMDB path segment."""

    MOVIE = "movie"
    TV_SERIES = "tv"

    @classmethod
    def parse(cls, value):
        """
        Resolve a configured value into a MediaType.

        Args:
            value: A MediaType or its wire value ('movie' or 'tv')

        Returns:
            The matching MediaType

        Raises:
            ValueError: If the value is not a known media type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown media type {value!r}, expected one of: {choices}") from None


ALL_SEASONS_NAME = "All"


def all_seasons_entry(details: Dict[str, Any]) -> Dict[str, Any]:
    """Build the synthetic season entry that stands for the whole series."""
    return {
        "name": ALL_SEASONS_NAME,
        "season_number": None,
        "vote_average": details.get("vote_average"),
    }
