"""Load organizer roster spreadsheets into OutingPlayer records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence
from uuid import uuid4

from pydantic import BaseModel

from pyouting.models import OutingPlayer


logger = logging.getLogger(__name__)


class RosterImportError(ValueError):
    """Raised when a roster file cannot be turned into players."""


DEFAULT_ROSTER_MAPPING = {
    "player_id": "player_id",
    "name": "name",
    "ghost": "ghost",
    "handicap": "handicap",
    "avatar": "avatar",
    "contact": "contact",
}


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str
    raw_ghost: Optional[str] = None
    raw_handicap: Optional[str] = None
    raw_avatar: Optional[str] = None
    raw_contact: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            spec = mapping.get(key)
            if spec is None:
                return default
            if "|" in spec:
                parts = [row.get(col.strip(), "").strip() for col in spec.split("|")]
                parts = [part for part in parts if part]
                return " ".join(parts) if parts else default
            value = row.get(spec)
            if value is None or not value.strip():
                return default
            return value.strip()

        return cls(
            raw_id=extract("player_id"),
            raw_name=extract("name", default="") or "",
            raw_ghost=extract("ghost"),
            raw_handicap=extract("handicap"),
            raw_avatar=extract("avatar"),
            raw_contact=extract("contact"),
        )


def _parse_flag(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "ghost", "guest"}


def _parse_handicap(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    text = raw.strip()
    try:
        # "+2.1" is a plus handicap, i.e. better than scratch.
        if text.startswith("+"):
            return -float(text[1:])
        return float(text)
    except ValueError:
        raise RosterImportError(f"handicap '{raw}' is not numeric") from None


def _contact_type(contact: Optional[str]) -> Optional[str]:
    if not contact:
        return None
    return "email" if "@" in contact else "phone"


def rows_to_players(rows: Sequence[RosterRow]) -> List[OutingPlayer]:
    players: List[OutingPlayer] = []
    seen: set[str] = set()
    for line, row in enumerate(rows, start=2):
        if not row.raw_name:
            raise RosterImportError(f"row {line} has no player name")
        is_ghost = _parse_flag(row.raw_ghost) or not row.raw_id
        player_id = row.raw_id or f"ghost_{uuid4().hex[:12]}"
        if player_id in seen:
            raise RosterImportError(f"duplicate player_id {player_id!r} on row {line}")
        seen.add(player_id)
        players.append(
            OutingPlayer(
                player_id=player_id,
                display_name=row.raw_name,
                avatar=row.raw_avatar,
                is_ghost=is_ghost,
                handicap_index=_parse_handicap(row.raw_handicap),
                contact_info=row.raw_contact,
                contact_type=_contact_type(row.raw_contact),
            )
        )
    ghosts = sum(1 for player in players if player.is_ghost)
    logger.debug("Loaded %d roster players (%d ghosts)", len(players), ghosts)
    return players


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[OutingPlayer]:
    """Read a roster CSV; rows without a player id become ghost players."""

    mapping = {**DEFAULT_ROSTER_MAPPING, **(mapping or {})}
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [RosterRow.from_mapping(row, mapping) for row in reader]
    return rows_to_players(rows)
