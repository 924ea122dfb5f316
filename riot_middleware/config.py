"""Flask configuration for the Riot middleware service."""

import os

VERSION = os.environ.get('VERSION', '1.0.0')
"""Reported by the root endpoint."""

BASE_PATH = os.environ.get('BASE_PATH', '/api')
"""All routes are mounted beneath this prefix."""

LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')

#################### Riot Games API ####################
RIOT_API_URL = os.environ.get('RIOT_API_URL')
"""Base URL of the upstream game-data API, e.g. ``https://europe.api.riotgames.com``."""

RIOT_API_KEY = os.environ.get('RIOT_API_KEY')
"""Sent upstream in the ``X-Riot-Token`` header."""

UPSTREAM_TIMEOUT = float(os.environ.get('UPSTREAM_TIMEOUT', '10'))
"""Seconds to wait on the Riot API or Appwrite before giving up."""

#################### Appwrite ####################
APPWRITE_ENDPOINT_URL = os.environ.get('APPWRITE_ENDPOINT_URL')
"""Appwrite API endpoint, including the version path, e.g.
``https://cloud.appwrite.io/v1``."""

APPWRITE_PROJECT_ID = os.environ.get('APPWRITE_PROJECT_ID')
APPWRITE_API_KEY = os.environ.get('APPWRITE_API_KEY')

#################### Auth ####################
API_SECRET_KEY = os.environ.get('API_SECRET_KEY')
"""Shared secret callers must present to reach the preferences routes."""

REQUIRED_CONFIGS = [
    'RIOT_API_URL',
    'RIOT_API_KEY',
    'APPWRITE_ENDPOINT_URL',
    'APPWRITE_PROJECT_ID',
    'APPWRITE_API_KEY',
    'API_SECRET_KEY',
]
"""The service refuses to start unless all of these are set."""
