"""Input adapters that normalize raw roster data."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    RosterImportError,
    RosterRow,
    load_roster_csv,
    rows_to_players,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "RosterImportError",
    "RosterRow",
    "load_roster_csv",
    "rows_to_players",
]
