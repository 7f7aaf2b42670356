"""
Models module for quickadd-tmdb.
"""

from .media import MediaType, ALL_SEASONS_NAME, all_seasons_entry

__all__ = ['MediaType', 'ALL_SEASONS_NAME', 'all_seasons_entry']
