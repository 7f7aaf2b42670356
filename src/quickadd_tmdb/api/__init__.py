"""
API module for quickadd-tmdb.

This module contains the connection to The Movie Database API.
"""

from quickadd_tmdb.api.tmdb import TMDB, format_movie_result, format_tv_result, format_search_result

__all__ = ['TMDB', 'format_movie_result', 'format_tv_result', 'format_search_result']
