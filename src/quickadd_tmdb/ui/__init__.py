"""
UI module for quickadd-tmdb.

This module contains the terminal host and the command-line interface.
"""

from .cli import CLI, TerminalQuickAddApi, main
