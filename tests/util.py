"""Shared helpers for the test suite."""

import requests

SECRET = 'sekrit-api-key'

TEST_CONFIG = {
    'RIOT_API_URL': 'https://riot.example.com',
    'RIOT_API_KEY': 'RGAPI-test',
    'APPWRITE_ENDPOINT_URL': 'https://appwrite.example.com/v1',
    'APPWRITE_PROJECT_ID': 'project',
    'APPWRITE_API_KEY': 'appwrite-key',
    'API_SECRET_KEY': SECRET,
    'BASE_PATH': '/api',
    'VERSION': '1.0.0',
}


def make_response(status_code: int, content: bytes = b'') -> requests.Response:
    """Build a real :class:`requests.Response` with the given status/body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    if content:
        response.headers['Content-Type'] = 'application/json'
    return response
