"""
Provides access to users stored in the Appwrite identity service.

Only the Users API is used: a user is fetched by id, and its preferences
object is replaced wholesale. Requests are authenticated with a server API
key, sent as ``X-Appwrite-Key`` alongside ``X-Appwrite-Project``.
"""

from functools import wraps
from typing import Any, Dict, Optional
from urllib.parse import quote
import logging

import requests
from werkzeug.local import LocalProxy

from riot_middleware.context import get_application_config, \
    get_application_global
from riot_middleware.domain import UserRecord
from .exceptions import UpstreamTimeout, UserNotFound

logger = logging.getLogger(__name__)


class IdentitySession(object):
    """An HTTP session with the Appwrite Users API."""

    def __init__(self, endpoint: str, project_id: str, api_key: str,
                 timeout: float = 10) -> None:
        """Create a new HTTP session."""
        self.endpoint = endpoint.rstrip('/')
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({
            'X-Appwrite-Project': project_id,
            'X-Appwrite-Key': api_key,
            'Content-Type': 'application/json',
        })
        logger.debug('New IdentitySession with endpoint = %s', self.endpoint)

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def _request(self, method: str, user_id: str, *path: str,
                 payload: Optional[dict] = None) -> Dict[str, Any]:
        url = '/'.join([self.endpoint, 'users', quote(user_id, safe='')]
                       + list(path))
        try:
            response = self._session.request(method, url, json=payload,
                                             timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise UpstreamTimeout('Appwrite timed out') from e
        except requests.exceptions.RequestException as e:
            raise IOError('Could not reach Appwrite: %s' % e) from e

        if response.status_code == requests.codes.not_found:
            raise UserNotFound('No such user: %s' % user_id)
        if not 200 <= response.status_code < 300:
            logger.debug('Appwrite responded with status %i',
                         response.status_code)
            raise IOError('Appwrite request failed: %i'
                          % response.status_code)
        try:
            data: Dict[str, Any] = response.json()
        except ValueError as e:
            raise IOError('Could not decode Appwrite response') from e
        return data

    def get_user(self, user_id: str) -> UserRecord:
        """
        Get a user by id.

        Parameters
        ----------
        user_id : str

        Returns
        -------
        :class:`.UserRecord`

        Raises
        ------
        :class:`.UserNotFound`
            If there is no such user.
        IOError
            If there is some other problem talking to Appwrite.

        """
        data = self._request('GET', user_id)
        return UserRecord(id=data.get('$id', user_id),
                          prefs=data.get('prefs') or {},
                          updated_at=data.get('$updatedAt'))

    def update_prefs(self, user_id: str, prefs: Dict[str, Any]) -> UserRecord:
        """
        Replace the preferences object of a user.

        Appwrite answers with the stored preferences rather than the whole
        user, so ``id`` falls back to ``user_id`` and ``updated_at`` may be
        None.

        Raises
        ------
        :class:`.UserNotFound`
            If there is no such user.
        IOError
            If there is some other problem talking to Appwrite.

        """
        data = self._request('PATCH', user_id, 'prefs',
                             payload={'prefs': prefs})
        if 'prefs' in data and isinstance(data['prefs'], dict):
            stored = data['prefs']
        else:
            stored = {k: v for k, v in data.items() if not k.startswith('$')}
        return UserRecord(id=data.get('$id', user_id),
                          prefs=stored,
                          updated_at=data.get('$updatedAt'))


def get_session(app: Optional[LocalProxy] = None) -> IdentitySession:
    """Create a new :class:`.IdentitySession` from the application config."""
    config = get_application_config(app)
    return IdentitySession(config['APPWRITE_ENDPOINT_URL'],
                           config['APPWRITE_PROJECT_ID'],
                           config['APPWRITE_API_KEY'],
                           float(config.get('UPSTREAM_TIMEOUT', 10)))


def current_session(app: Optional[LocalProxy] = None) -> IdentitySession:
    """Get the identity session for this request context."""
    g = get_application_global()
    if g:
        if 'identity' not in g:
            g.identity = get_session(app)  # type: ignore
        return g.identity  # type: ignore
    return get_session(app)


@wraps(IdentitySession.get_user)
def get_user(user_id: str) -> UserRecord:
    """Wrapper for :meth:`IdentitySession.get_user`."""
    return current_session().get_user(user_id)


@wraps(IdentitySession.update_prefs)
def update_prefs(user_id: str, prefs: Dict[str, Any]) -> UserRecord:
    """Wrapper for :meth:`IdentitySession.update_prefs`."""
    return current_session().update_prefs(user_id, prefs)
