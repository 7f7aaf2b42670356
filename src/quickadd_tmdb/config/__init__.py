"""
Configuration module for quickadd-tmdb.
"""

import os

from quickadd_tmdb.config.settings import (
    TMDB_API_KEY_OPTION, TYPE_OPTION, TMDB_BASE_URL, REQUEST_TIMEOUT,
    LOG_LEVEL, LOG_FILE,
)
from quickadd_tmdb.models.media import MediaType

# Settings schema declared to the host; the host stores the values
SETTINGS = {
    'name': 'tmdb',
    'author': 'Jakub Sarnowski',
    'options': {
        TMDB_API_KEY_OPTION: {
            'type': 'text',
        },
        TYPE_OPTION: {
            'type': 'dropdown',
            'options': [media_type.value for media_type in MediaType],
        },
    },
}


def get_settings(key=None, default=None):
    """Get plugin settings from environment variables.

    The returned dict has the same shape as the one the host passes to
    ``run()``: the API key under ``TMDB_API_KEY`` and the media type under
    ``type``.

    Args:
        key (str, optional): Specific setting key to retrieve. If None, returns all settings.
        default (any, optional): Default value if setting is not found.

    Returns:
        dict or any: All settings or specific setting value
    """
    settings = {
        TMDB_API_KEY_OPTION: os.environ.get('TMDB_API_KEY', ''),
        TYPE_OPTION: os.environ.get('TMDB_TYPE', MediaType.MOVIE.value),
    }

    if key is not None:
        return settings.get(key, default)

    return settings


__all__ = [
    'SETTINGS', 'get_settings', 'TMDB_API_KEY_OPTION', 'TYPE_OPTION',
    'TMDB_BASE_URL', 'REQUEST_TIMEOUT', 'LOG_LEVEL', 'LOG_FILE',
]
