"""The riot service forwards requests to the Riot Games API."""

import json
from functools import wraps
from typing import Any, Dict, List, Optional
from urllib.parse import quote
import logging

import requests
from werkzeug.local import LocalProxy

from riot_middleware.context import get_application_config, \
    get_application_global
from .exceptions import UpstreamError, UpstreamTimeout

logger = logging.getLogger(__name__)


class RiotSession(object):
    """
    An HTTP session with the Riot Games API.

    Every request carries the ``X-Riot-Token`` header. Nothing is retried.
    """

    def __init__(self, base_url: str, api_key: str,
                 timeout: float = 10) -> None:
        """Create a new HTTP session."""
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({'X-Riot-Token': api_key})
        logger.debug('New RiotSession with base_url = %s', self.base_url)

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def _path(self, *segments: str) -> str:
        return '/'.join([self.base_url]
                        + [quote(str(s), safe='') for s in segments])

    def _get(self, url: str, fallback: str,
             params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``url`` and return its decoded JSON body.

        Raises
        ------
        :class:`.UpstreamError`
            If the API responds with a non-2xx status. The message is taken
            from the error body when it can be read, else ``fallback``.
        :class:`.UpstreamTimeout`
            If the API does not respond in time.
        IOError
            If the API cannot be reached or its response cannot be decoded.

        """
        try:
            response = self._session.get(url, params=params,
                                         timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise UpstreamTimeout('Riot API timed out') from e
        except requests.exceptions.RequestException as e:
            raise IOError('Could not reach the Riot API: %s' % e) from e

        if not 200 <= response.status_code < 300:
            logger.debug('Riot API responded with status %i',
                         response.status_code)
            raise UpstreamError(response.status_code,
                                _error_message(response) or fallback)
        try:
            return response.json()
        except ValueError as e:
            logger.debug('Riot API response could not be decoded')
            raise IOError('Could not decode Riot API response') from e

    def get_account(self, region: str, summoner_name: str) -> Dict[str, Any]:
        """
        Look up an account by Riot ID.

        Parameters
        ----------
        region : str
            The tag line half of the Riot ID.
        summoner_name : str
            The game name half of the Riot ID.

        Returns
        -------
        dict
            The account, as returned by the API.

        """
        url = self._path('riot', 'account', 'v1', 'accounts', 'by-riot-id',
                         summoner_name, region)
        return self._get(url, 'Failed to fetch account')

    def get_match(self, game: str, match_id: str) -> Dict[str, Any]:
        """Get the details of a single match."""
        url = self._path(game, 'match', 'v5', 'matches', match_id)
        return self._get(url, 'Failed to fetch match details')

    def get_match_ids(self, game: str, puuid: str, start: int = 0,
                      count: int = 20, type: str = '') -> List[str]:
        """Get a page of match ids played by ``puuid``, most recent first."""
        url = self._path(game, 'match', 'v5', 'matches', 'by-puuid', puuid,
                         'ids')
        params = {'start': start, 'count': count, 'type': type}
        return self._get(url, 'Failed to fetch match IDs', params=params)


def _error_message(response: requests.Response) -> Optional[str]:
    """Pull ``status.message`` out of a Riot error body, if there is one."""
    try:
        data = response.json()
    except (ValueError, json.decoder.JSONDecodeError):
        return None
    if not isinstance(data, dict) or not isinstance(data.get('status'), dict):
        return None
    return data['status'].get('message') or None


def get_session(app: Optional[LocalProxy] = None) -> RiotSession:
    """Create a new :class:`.RiotSession` from the application config."""
    config = get_application_config(app)
    return RiotSession(config['RIOT_API_URL'], config['RIOT_API_KEY'],
                       float(config.get('UPSTREAM_TIMEOUT', 10)))


def current_session(app: Optional[LocalProxy] = None) -> RiotSession:
    """Get the Riot session for this request context, creating it if needed."""
    g = get_application_global()
    if g:
        if 'riot' not in g:
            g.riot = get_session(app)  # type: ignore
        return g.riot  # type: ignore
    return get_session(app)


@wraps(RiotSession.get_account)
def get_account(region: str, summoner_name: str) -> Dict[str, Any]:
    """Wrapper for :meth:`RiotSession.get_account`."""
    return current_session().get_account(region, summoner_name)


@wraps(RiotSession.get_match)
def get_match(game: str, match_id: str) -> Dict[str, Any]:
    """Wrapper for :meth:`RiotSession.get_match`."""
    return current_session().get_match(game, match_id)


@wraps(RiotSession.get_match_ids)
def get_match_ids(game: str, puuid: str, start: int = 0, count: int = 20,
                  type: str = '') -> List[str]:
    """Wrapper for :meth:`RiotSession.get_match_ids`."""
    return current_session().get_match_ids(game, puuid, start, count, type)
