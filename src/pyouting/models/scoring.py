"""Live score inputs and derived outputs (leaderboard rows, warnings)."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LiveScoreEntry(BaseModel):
    """Per-player snapshot produced by the live scoring subsystem."""

    current_gross: int
    current_net: int
    score_to_par: int
    thru: int = Field(default=0, ge=0)
    stableford_points: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class OutingLeaderboardEntry(BaseModel):
    player_id: str
    display_name: str
    avatar: Optional[str] = None
    group_id: str
    group_name: str
    gross_score: int
    net_score: int
    score_to_par: int
    thru: int
    format_score: Optional[int] = None
    position: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class WarningType(str, Enum):
    UNASSIGNED_PLAYERS = "unassigned_players"
    GHOST_MARKER = "ghost_marker"
    NO_MARKER = "no_marker"
    SMALL_GROUP = "small_group"
    UNEVEN_GROUP = "uneven_group"


class OutingValidationWarning(BaseModel):
    type: WarningType
    group_id: Optional[str] = None
    message: str

    model_config = ConfigDict(frozen=True)
