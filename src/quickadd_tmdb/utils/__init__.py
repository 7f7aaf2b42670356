"""
Utilities module for quickadd-tmdb.
"""

from .logger import get_logger, setup_logging
