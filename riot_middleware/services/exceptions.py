"""Provides exceptions occurring with external services."""


class UpstreamError(RuntimeError):
    """The Riot API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class UpstreamTimeout(RuntimeError):
    """An external service did not answer within the configured deadline."""


class UserNotFound(RuntimeError):
    """The identity service has no user with the requested id."""
