"""Defines the core data structures for the Riot middleware service."""

from typing import Any, Dict, NamedTuple, Optional

VALID_GAMES = ('lol', 'tft', 'lor', 'val')
"""Riot titles whose match endpoints we forward."""

PREFERENCE_FIELDS = (
    'theme',
    'language',
    'notifications',
    'privacy',
    'gameSettings',
    'customSettings',
)


class PreferencesRecord(NamedTuple):
    """A user's preferences. Values are opaque and stored as given."""

    theme: Any = None
    language: Any = None
    notifications: Any = None
    privacy: Any = None
    gameSettings: Any = None
    customSettings: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PreferencesRecord':
        """Project ``data`` onto the known fields, dropping everything else."""
        return cls(**{field: data.get(field) for field in PREFERENCE_FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._asdict())


class UserRecord(NamedTuple):
    """A user as stored by the identity service."""

    id: str
    prefs: Dict[str, Any]
    updated_at: Optional[str] = None
