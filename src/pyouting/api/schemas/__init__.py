"""Pydantic models for API I/O."""

from .outing import (
    AutoAssignRequest,
    LaunchCheckResponse,
    MarkerRequest,
    MovePlayerRequest,
    SnapshotPayload,
    SnapshotResponse,
    ValidationResponse,
)
from .leaderboard import LeaderboardRequest, LeaderboardResponse

__all__ = [
    "AutoAssignRequest",
    "LaunchCheckResponse",
    "LeaderboardRequest",
    "LeaderboardResponse",
    "MarkerRequest",
    "MovePlayerRequest",
    "SnapshotPayload",
    "SnapshotResponse",
    "ValidationResponse",
]
