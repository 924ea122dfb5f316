"""
Request controllers.

Controllers validate input, call services, and return ``(data, status,
headers)``. Failures are raised as :class:`werkzeug.exceptions.HTTPException`
and rendered as error envelopes by the application factory.
"""

from typing import Any, Dict, Optional, Tuple

from werkzeug.exceptions import HTTPException

Response = Tuple[Optional[dict], int, Dict[str, Any]]

INTERNAL_ERROR = 'Internal server error'
UPSTREAM_TIMEOUT = 'Upstream request timed out'


class UpstreamFailure(HTTPException):
    """Relays the status code and message of a failed upstream call."""

    def __init__(self, code: int, description: str) -> None:
        super().__init__(description)
        self.code = code
