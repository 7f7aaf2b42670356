"""
quickadd-tmdb: fill note templates with movie and TV metadata from TMDB.
"""

__version__ = '0.1.0'

from quickadd_tmdb.config import SETTINGS
from quickadd_tmdb.core.capture import run

# Entry point and settings schema, in the shape note-app hosts load plugins
entry = run
settings = SETTINGS
