"""Helpers for reaching the application config and globals."""

import os
from typing import Any, Mapping, Optional

from flask import current_app, g, has_app_context
from werkzeug.local import LocalProxy


def get_application_config(app: Optional[LocalProxy] = None) -> Mapping[str, Any]:
    """
    Get a configuration from the current app, or fall back to env.

    Parameters
    ----------
    app : :class:`werkzeug.local.LocalProxy`

    Returns
    -------
    Mapping
        Config values keyed by name.

    """
    if app is not None:
        return app.config
    if has_app_context():
        return current_app.config
    return os.environ


def get_application_global() -> Optional[LocalProxy]:
    """Get the current request globals, or None outside a request context."""
    if has_app_context():
        return g
    return None
