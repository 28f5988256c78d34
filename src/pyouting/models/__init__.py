"""Data models for rosters, groups and live scoring."""

from .outing import GroupStatus, OutingGroup, OutingPlayer, OutingSnapshot
from .scoring import (
    LiveScoreEntry,
    OutingLeaderboardEntry,
    OutingValidationWarning,
    WarningType,
)

__all__ = [
    "GroupStatus",
    "LiveScoreEntry",
    "OutingGroup",
    "OutingLeaderboardEntry",
    "OutingPlayer",
    "OutingSnapshot",
    "OutingValidationWarning",
    "WarningType",
]
