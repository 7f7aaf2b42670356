"""
TMDB API client.

This module provides functionality for interacting with The Movie Database API.
"""

import requests
from typing import Dict, Any, Optional, Union

from quickadd_tmdb.config import TMDB_BASE_URL, REQUEST_TIMEOUT
from quickadd_tmdb.exceptions import TMDBRequestError, TMDBResponseError
from quickadd_tmdb.models.media import MediaType
from quickadd_tmdb.utils.logger import get_logger

logger = get_logger(__name__)


class TMDB:
    """
    Client for The Movie Database API.
    """

    def __init__(self, api_key: str, base_url: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """
        Initialize the TMDB client.

        Args:
            api_key: TMDB API key, sent as a query parameter on every request
            base_url: API root including the version segment
            timeout: Request timeout in seconds
            session: Optional requests session to reuse
        """
        self.api_key = api_key
        self.base_url = (base_url or TMDB_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
        self.session = session or requests.Session()

        if not self.api_key:
            logger.warning("TMDB API key not set. API requests will fail.")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()

    def _request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Make a request to the TMDB API.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            JSON response as a dictionary

        Raises:
            TMDBRequestError: On transport failure or an error status
            TMDBResponseError: If the body is not JSON
        """
        url = f"{self.base_url}/{endpoint}"

        params = dict(params or {})
        params['api_key'] = self.api_key

        logger.debug(f"GET {url} params={_redact(params)}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status_code = getattr(getattr(e, 'response', None), 'status_code', None)
            logger.error(f"Error making TMDB API request to {endpoint}: {e}")
            raise TMDBRequestError(f"TMDB request to {endpoint} failed: {e}", status_code) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"TMDB API returned a non-JSON body for {endpoint}: {e}")
            raise TMDBResponseError(f"TMDB response for {endpoint} is not valid JSON") from e

    def search(self, name: str, media_type: Union[MediaType, str]) -> Dict[str, Any]:
        """
        Search for movies or TV shows by name.

        Args:
            name: Free-text query
            media_type: Which collection to search

        Returns:
            Parsed search response, expected to hold a 'results' list
        """
        media_type = MediaType.parse(media_type)
        return self._request(f'search/{media_type.value}', {'query': name})

    def get_details(self, item_id: Union[int, str], media_type: Union[MediaType, str]) -> Dict[str, Any]:
        """
        Get details for a movie or TV show.

        Args:
            item_id: TMDB ID
            media_type: Kind of record the ID refers to

        Returns:
            Detail record, verbatim
        """
        media_type = MediaType.parse(media_type)
        return self._request(f'{media_type.value}/{item_id}')


def _redact(params: Dict[str, Any]) -> Dict[str, Any]:
    return {k: ('***' if k == 'api_key' else v) for k, v in params.items()}


def format_movie_result(movie: Dict[str, Any]) -> str:
    """
    Format a movie result for display to the user.

    Args:
        movie: Movie data from TMDB API

    Returns:
        Formatted string with title, original language and release date
    """
    return f"{movie.get('title')} ({movie.get('original_language')}, {movie.get('release_date')})"


def format_tv_result(show: Dict[str, Any]) -> str:
    """
    Format a TV show result for display to the user.

    Args:
        show: TV show data from TMDB API

    Returns:
        Formatted string with name, original language and first air date
    """
    return f"{show.get('name')} ({show.get('original_language')}, {show.get('first_air_date')})"


def format_search_result(item: Dict[str, Any], media_type: Union[MediaType, str]) -> str:
    """Format a search result with the formatter matching the media type."""
    if MediaType.parse(media_type) is MediaType.TV_SERIES:
        return format_tv_result(item)
    return format_movie_result(item)
