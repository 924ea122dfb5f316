"""Uniform JSON envelopes for every response."""

from datetime import datetime, timezone
from typing import Any, Dict


def iso_now() -> str:
    """Return the current UTC time as an ISO-8601 string ending in Z."""
    return datetime.now(timezone.utc) \
        .isoformat(timespec='milliseconds') \
        .replace('+00:00', 'Z')


def error_response(status: int, message: str) -> Dict[str, Any]:
    """Build the error envelope for ``status``."""
    return {
        'error': True,
        'status': int(status),
        'message': message,
        'timestamp': iso_now(),
    }


def success_response(**data: Any) -> Dict[str, Any]:
    """Build a success envelope carrying ``data`` alongside a timestamp."""
    return {'success': True, **data, 'timestamp': iso_now()}
