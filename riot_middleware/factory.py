"""Provides an app factory for the Riot middleware."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from . import routes
from .app_logging import setup_logger
from .envelope import error_response

logger = logging.getLogger(__name__)

SESSION_KEYS = ('riot', 'identity')
"""Names on ``g`` under which services keep their per-request sessions."""

ENDPOINT_NOT_FOUND = 'Endpoint not found'
INTERNAL_ERROR = 'Internal server error'


class ConfigurationError(RuntimeError):
    """Raised when a required configuration parameter is missing."""


def missing_configs(config: Mapping[str, Any]) -> list:
    """Names of required parameters that are unset or empty in ``config``."""
    return [key for key in config.get('REQUIRED_CONFIGS', [])
            if not config.get(key)]


def jsonify_exception(error: HTTPException) -> Response:
    """Render an HTTP exception as an error envelope."""
    if request.url_rule is None \
            and isinstance(error, (NotFound, MethodNotAllowed)):
        code, message = 404, ENDPOINT_NOT_FOUND
    else:
        code, message = error.code or 500, error.description
    response = jsonify(error_response(code, message))
    response.status_code = code
    return response


def handle_unexpected(error: Exception) -> Response:
    """Last resort for anything a controller did not handle."""
    logger.exception('Unhandled error: %s', error)
    response = jsonify(error_response(500, INTERNAL_ERROR))
    response.status_code = 500
    return response


def close_sessions(exception: Optional[BaseException] = None) -> None:
    """Close any service sessions opened during this context."""
    for key in SESSION_KEYS:
        session = g.pop(key, None)
        if session is not None:
            session.close()


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Initialize an instance of the Riot middleware.

    Parameters
    ----------
    config : Mapping
        Overrides applied on top of the environment-derived configuration.

    Raises
    ------
    :class:`.ConfigurationError`
        If any of ``REQUIRED_CONFIGS`` is missing.

    """
    app = Flask('riot_middleware')
    app.config.from_pyfile('config.py')
    if config:
        app.config.update(config)

    setup_logger(app.config.get('LOGLEVEL', 'INFO'))
    missing = missing_configs(app.config)
    if missing:
        logger.error('Missing required configuration: %s', ', '.join(missing))
        raise ConfigurationError('Missing required configuration: %s'
                                 % ', '.join(missing))

    app.register_blueprint(routes.blueprint,
                           url_prefix=app.config['BASE_PATH'] or None)
    app.errorhandler(HTTPException)(jsonify_exception)
    app.errorhandler(Exception)(handle_unexpected)
    app.teardown_appcontext(close_sessions)
    return app
