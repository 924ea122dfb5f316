"""Web Server Gateway Interface entry-point."""

from riot_middleware.factory import create_app
import os

__flask_app__ = None


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    for key, value in environ.items():
        # ``SERVER_NAME`` from the request environ is usually a container id.
        if key == 'SERVER_NAME':
            continue
        if key.startswith('HTTP_') or not isinstance(value, str):
            continue
        os.environ[key] = value

    global __flask_app__
    if __flask_app__ is None:
        __flask_app__ = create_app()
    return __flask_app__(environ, start_response)
