"""
Configuration settings for quickadd-tmdb.

This module loads configuration from the .env file and
defines constants used throughout the application.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory
load_dotenv()

# Option keys of the plugin settings, as stored by the host
TMDB_API_KEY_OPTION = 'TMDB_API_KEY'
TYPE_OPTION = 'type'

# API Settings
TMDB_BASE_URL = os.getenv('TMDB_BASE_URL', 'https://api.themoviedb.org/3')
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '10'))

# Public URL patterns used in the generated variables
TMDB_POSTER_BASE_URL = 'https://image.tmdb.org/t/p/original'
TMDB_WEB_URL = 'https://www.themoviedb.org'

# Logging Settings
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FILE = os.getenv('LOG_FILE', '')
