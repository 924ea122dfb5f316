"""Handles requests forwarded to the Riot Games API."""

import logging
from http import HTTPStatus
from typing import Any, Optional

from werkzeug.exceptions import BadRequest, GatewayTimeout, \
    InternalServerError

from riot_middleware.domain import VALID_GAMES
from riot_middleware.envelope import success_response
from riot_middleware.services import riot
from riot_middleware.services.exceptions import UpstreamError, \
    UpstreamTimeout
from . import Response, UpstreamFailure, INTERNAL_ERROR, UPSTREAM_TIMEOUT

logger = logging.getLogger(__name__)

INVALID_BODY = 'Invalid JSON body'
MISSING_ACCOUNT_PARAMS = 'Missing required parameters: region and summonerName'
INVALID_ACCOUNT_TYPES = ('Invalid parameter types: region and summonerName '
                         'must be strings')
INVALID_GAME = ('Invalid game parameter. Must be one of: '
                + ', '.join(VALID_GAMES))
INVALID_START = 'Invalid start parameter. Must be a non-negative integer'
INVALID_COUNT = 'Invalid count parameter. Must be between 1 and 100'

DEFAULT_START = '0'
DEFAULT_COUNT = '20'
MAX_COUNT = 100


def _validate_game(game: str) -> None:
    if game not in VALID_GAMES:
        raise BadRequest(INVALID_GAME)


def _parse_int(value: str) -> Optional[int]:
    """Parse an optionally negative run of ASCII digits, else None."""
    if not isinstance(value, str):
        return None
    digits = value[1:] if value.startswith('-') else value
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(value)


def _call(operation: str, func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a Riot service function, translating its failures to HTTP."""
    try:
        return func(*args, **kwargs)
    except UpstreamError as e:
        logger.error('%s error: upstream responded %i: %s', operation,
                     e.status_code, e.message)
        raise UpstreamFailure(e.status_code, e.message) from e
    except UpstreamTimeout as e:
        logger.error('%s error: %s', operation, e)
        raise GatewayTimeout(UPSTREAM_TIMEOUT) from e
    except Exception as e:
        logger.error('%s error: %s', operation, e)
        raise InternalServerError(INTERNAL_ERROR) from e


def fetch_account(payload: Optional[Any]) -> Response:
    """
    Look up a Riot account.

    Parameters
    ----------
    payload : dict
        Request body, with ``region`` and ``summonerName``.

    Returns
    -------
    dict
        Success envelope wrapping the account.
    int
        An HTTP status code.
    dict
        Some extra headers to add to the response.

    """
    if payload is None:
        raise BadRequest(INVALID_BODY)
    if not isinstance(payload, dict):
        raise BadRequest(MISSING_ACCOUNT_PARAMS)
    region = payload.get('region')
    summoner_name = payload.get('summonerName')
    if not region or not summoner_name:
        raise BadRequest(MISSING_ACCOUNT_PARAMS)
    if not isinstance(region, str) or not isinstance(summoner_name, str):
        raise BadRequest(INVALID_ACCOUNT_TYPES)

    data = _call('Account fetch', riot.get_account, region, summoner_name)
    return success_response(data=data), HTTPStatus.OK, {}


def get_match(game: str, match_id: str) -> Response:
    """Get details of a match."""
    _validate_game(game)
    data = _call('Match fetch', riot.get_match, game, match_id)
    return success_response(matchId=match_id, game=game, data=data), \
        HTTPStatus.OK, {}


def get_match_ids(game: str, puuid: str, params: dict) -> Response:
    """
    List match ids for a player.

    ``params`` are the query arguments: ``start`` (default 0), ``count``
    (default 20, at most 100) and ``type``.
    """
    _validate_game(game)
    start = _parse_int(params.get('start') or DEFAULT_START)
    count = _parse_int(params.get('count') or DEFAULT_COUNT)
    match_type = params.get('type') or ''
    if start is None or start < 0:
        raise BadRequest(INVALID_START)
    if count is None or count < 1 or count > MAX_COUNT:
        raise BadRequest(INVALID_COUNT)

    data = _call('Match IDs fetch', riot.get_match_ids, game, puuid,
                 start=start, count=count, type=match_type)
    return success_response(game=game, puuid=puuid, start=start, count=count,
                            data=data), HTTPStatus.OK, {}
