"""
Template variable mapping.

Turns a TMDB detail record into the flat dict of variables a note template
consumes. Everything here is a pure function of its arguments except
``create_variables_by_type``, which asks the host for the season of a series.
"""

from typing import Any, Dict, List, Optional, Union

from quickadd_tmdb.config.settings import TMDB_POSTER_BASE_URL, TMDB_WEB_URL
from quickadd_tmdb.core.host import QuickAddApi
from quickadd_tmdb.exceptions import MissingDataError
from quickadd_tmdb.models.media import MediaType, all_seasons_entry
from quickadd_tmdb.utils.logger import get_logger

logger = get_logger(__name__)


def _require(data: Dict[str, Any], field: str, record: str = "detail record") -> Any:
    value = data.get(field)
    if value is None:
        raise MissingDataError(field, record)
    return value


def create_poster_variable(poster_path: Optional[str]) -> str:
    """Full-size poster URL for a TMDB poster path.

    A missing path gives the bare prefix, not a URL ending in "None".
    """
    return f"{TMDB_POSTER_BASE_URL}{poster_path or ''}"


def create_genres_variable(genres: List[Dict[str, Any]]) -> str:
    """Lower-cased genre names joined with ', ', in API order."""
    return ", ".join(_require(genre, "name", "genre").lower() for genre in genres)


def create_common_variables(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "genres": create_genres_variable(_require(data, "genres")),
        "language": data.get("original_language"),
    }


def create_movie_variables(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Movie-specific variables.

    Args:
        data: Movie detail record

    Returns:
        title, release_date, tmdb_rating, tmdb_poster and tmdb_link
    """
    return {
        "title": _require(data, "title").lower(),
        "release_date": data.get("release_date"),
        "tmdb_rating": data.get("vote_average"),
        "tmdb_poster": create_poster_variable(data.get("poster_path")),
        "tmdb_link": f"{TMDB_WEB_URL}/movie/{_require(data, 'id')}",
    }


def create_season_suggestions(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """The "All" entry followed by the series' own seasons."""
    return [all_seasons_entry(data), *_require(data, "seasons")]


def create_tv_series_variables(data: Dict[str, Any], season: Dict[str, Any]) -> Dict[str, Any]:
    """
    TV-specific variables for the chosen season entry.

    A truthy ``season_number`` describes that one season; anything else,
    including the "All" entry, describes the whole series.

    Args:
        data: TV detail record
        season: Entry picked from create_season_suggestions()

    Returns:
        title, air_date, season, number_of_episodes, number_of_seasons,
        tmdb_rating, tmdb_poster and tmdb_link
    """
    name = _require(data, "name").lower()
    show_id = _require(data, "id")
    season_number = season.get("season_number")

    if season_number:
        return {
            "title": f"{name} season {season_number}",
            "air_date": season.get("air_date"),
            "season": season_number,
            "number_of_episodes": season.get("episode_count"),
            "number_of_seasons": "n/a",
            "tmdb_rating": season.get("vote_average"),
            "tmdb_poster": create_poster_variable(season.get("poster_path")),
            "tmdb_link": f"{TMDB_WEB_URL}/tv/{show_id}/season/{season_number}",
        }

    return {
        "title": name,
        "air_date": data.get("first_air_date"),
        "season": "all",
        "number_of_episodes": data.get("number_of_episodes"),
        "number_of_seasons": data.get("number_of_seasons"),
        "tmdb_rating": data.get("vote_average"),
        "tmdb_poster": create_poster_variable(data.get("poster_path")),
        "tmdb_link": f"{TMDB_WEB_URL}/tv/{show_id}",
    }


def choose_season(data: Dict[str, Any], quick_add_api: QuickAddApi) -> Dict[str, Any]:
    """Ask the user which season (or "All") the note is about."""
    suggestions = create_season_suggestions(data)
    return quick_add_api.suggester(lambda item: item.get("name"), suggestions)


def create_variables_by_type(data: Dict[str, Any], media_type: Union[MediaType, str],
                             quick_add_api: QuickAddApi) -> Dict[str, Any]:
    """
    Build the full variable mapping for a detail record.

    Args:
        data: Detail record returned by TMDB
        media_type: Type the record was fetched as
        quick_add_api: Host prompts, used to pick a season for TV series

    Returns:
        Common variables merged with the type-specific ones
    """
    media_type = MediaType.parse(media_type)
    common_variables = create_common_variables(data)

    if media_type is MediaType.TV_SERIES:
        season = choose_season(data, quick_add_api)
        logger.debug(f"Season chosen: {season.get('name')}")
        return {**common_variables, **create_tv_series_variables(data, season)}

    return {**common_variables, **create_movie_variables(data)}
