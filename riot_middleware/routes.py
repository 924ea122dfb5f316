"""Provides routes for the middleware API."""

from flask import Blueprint, current_app, jsonify, request

from riot_middleware.authorization import authenticated
from riot_middleware.controllers import preferences, riot
from riot_middleware.envelope import iso_now

blueprint = Blueprint('riot_middleware', __name__)


@blueprint.route('/', methods=['GET'], strict_slashes=False)
def root() -> tuple:
    """Greeting and version."""
    return jsonify({
        'message': 'Hello Riot Middleware API',
        'version': current_app.config['VERSION'],
        'timestamp': iso_now(),
    }), 200


@blueprint.route('/account/fetch', methods=['POST'])
def fetch_account() -> tuple:
    """Look up an account by Riot ID."""
    payload = request.get_json(force=True, silent=True)
    data, status_code, headers = riot.fetch_account(payload)
    return jsonify(data), status_code, headers


@blueprint.route('/<game>/match/<match_id>', methods=['GET'])
def get_match(game: str, match_id: str) -> tuple:
    """Get the details of a match."""
    data, status_code, headers = riot.get_match(game, match_id)
    return jsonify(data), status_code, headers


@blueprint.route('/<game>/matches/by-puuid/<puuid>', methods=['GET'])
def get_match_ids(game: str, puuid: str) -> tuple:
    """List recent match ids for a player."""
    data, status_code, headers = riot.get_match_ids(game, puuid, request.args)
    return jsonify(data), status_code, headers


@blueprint.route('/users/<user_id>/prefs', methods=['PUT'])
@authenticated
def update_preferences(user_id: str) -> tuple:
    """Replace a user's preferences."""
    payload = request.get_json(force=True, silent=True)
    data, status_code, headers = preferences.update_preferences(user_id,
                                                                payload)
    return jsonify(data), status_code, headers


@blueprint.route('/users/<user_id>/prefs', methods=['GET'])
@authenticated
def get_preferences(user_id: str) -> tuple:
    """Get a user's preferences."""
    data, status_code, headers = preferences.get_preferences(user_id)
    return jsonify(data), status_code, headers
