"""Handles reading and writing user preferences."""

import json
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from werkzeug.exceptions import BadRequest, GatewayTimeout, \
    InternalServerError, NotFound

from riot_middleware.domain import PreferencesRecord
from riot_middleware.envelope import success_response
from riot_middleware.services import identity
from riot_middleware.services.exceptions import UpstreamTimeout, \
    UserNotFound
from . import Response, UPSTREAM_TIMEOUT

logger = logging.getLogger(__name__)

PREFS_KEY = 'prefs'
"""Key in the Appwrite preferences object that holds the serialized record."""

INVALID_PREFERENCES = 'Missing or invalid preferences object'
USER_NOT_FOUND = 'User not found'
UPDATE_FAILED = 'Failed to update preferences'
FETCH_FAILED = 'Failed to fetch preferences'
UPDATED = 'User preferences updated successfully'


def update_preferences(user_id: str, payload: Optional[Any]) -> Response:
    """
    Replace a user's preferences.

    Parameters
    ----------
    user_id : str
    payload : dict
        Request body; ``preferences`` must be an object. Known fields are
        kept as given, missing ones become null and the rest are dropped.

    Returns
    -------
    dict
        Success envelope with the user id, preferences and update time.
    int
        An HTTP status code.
    dict
        Some extra headers to add to the response.

    """
    preferences = payload.get('preferences') \
        if isinstance(payload, dict) else None
    if not isinstance(preferences, dict):
        raise BadRequest(INVALID_PREFERENCES)

    record = PreferencesRecord.from_dict(preferences).to_dict()
    try:
        user = identity.update_prefs(user_id, {PREFS_KEY: json.dumps(record)})
    except UserNotFound as e:
        logger.error('Preferences update error: %s', e)
        raise NotFound(USER_NOT_FOUND) from e
    except UpstreamTimeout as e:
        logger.error('Preferences update error: %s', e)
        raise GatewayTimeout(UPSTREAM_TIMEOUT) from e
    except Exception as e:
        logger.error('Preferences update error: %s', e)
        raise InternalServerError(UPDATE_FAILED) from e

    data = {'id': user.id, 'preferences': record, 'updatedAt': user.updated_at}
    return success_response(message=UPDATED, data=data), HTTPStatus.OK, {}


def _load_preferences(prefs: Dict[str, Any]) -> Dict[str, Any]:
    """Parse the stored record, falling back to an empty one."""
    raw = prefs.get(PREFS_KEY)
    if not raw or not isinstance(raw, str):
        return {}
    try:
        loaded = json.loads(raw)
    except ValueError as e:
        logger.warning('Failed to parse user preferences: %s', e)
        return {}
    if not isinstance(loaded, dict):
        logger.warning('Stored preferences are not an object')
        return {}
    return loaded


def get_preferences(user_id: str) -> Response:
    """Get a user's preferences."""
    try:
        user = identity.get_user(user_id)
    except UserNotFound as e:
        logger.error('Preferences fetch error: %s', e)
        raise NotFound(USER_NOT_FOUND) from e
    except UpstreamTimeout as e:
        logger.error('Preferences fetch error: %s', e)
        raise GatewayTimeout(UPSTREAM_TIMEOUT) from e
    except Exception as e:
        logger.error('Preferences fetch error: %s', e)
        raise InternalServerError(FETCH_FAILED) from e

    data = {
        'id': user.id,
        'preferences': _load_preferences(user.prefs),
        'updatedAt': user.updated_at,
    }
    return success_response(data=data), HTTPStatus.OK, {}
