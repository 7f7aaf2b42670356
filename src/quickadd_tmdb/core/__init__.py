"""
Core module for quickadd-tmdb.

This module contains the capture flow and the variable mapping.
"""

from .capture import run
from .host import QuickAdd, QuickAddApi
