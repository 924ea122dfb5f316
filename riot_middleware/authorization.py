"""Shared-secret authentication for protected routes."""

import hmac
import logging
from functools import wraps
from typing import Any, Callable, Mapping, Optional

from flask import current_app, g, request
from werkzeug.exceptions import Unauthorized

logger = logging.getLogger(__name__)

AUTH_REQUIRED = ('Authentication required. Provide Authorization: Bearer '
                 '<token> or X-API-Key header')
INVALID_TOKEN = 'Invalid authentication token'


def get_credential(headers: Mapping[str, str]) -> Optional[str]:
    """
    Extract the caller's credential from request headers.

    A bearer ``Authorization`` header wins over ``X-API-Key``, even when the
    token after ``Bearer`` is empty. Returns None if no value is found.
    """
    auth_header = headers.get('Authorization')
    # Servers may strip the trailing space from a bare "Bearer ".
    if auth_header == 'Bearer' or (auth_header or '').startswith('Bearer '):
        return auth_header[len('Bearer '):] or None
    return headers.get('X-API-Key') or None


def check_credential(token: Optional[str], secret: str) -> None:
    """
    Compare ``token`` to ``secret``.

    Raises
    ------
    :class:`werkzeug.exceptions.Unauthorized`
        If there is no token, or it does not match.

    """
    if not token:
        logger.error('Auth token missing')
        raise Unauthorized(AUTH_REQUIRED)
    if not hmac.compare_digest(token.encode('utf-8'),
                               secret.encode('utf-8')):
        logger.error('Invalid auth token')
        raise Unauthorized(INVALID_TOKEN)


def authenticated(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that requires the caller to present ``API_SECRET_KEY``."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        token = get_credential(request.headers)
        check_credential(token, current_app.config['API_SECRET_KEY'])
        g.authenticated = True
        g.auth_token = token
        return func(*args, **kwargs)
    return wrapper
