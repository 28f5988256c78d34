from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from pyouting.models import LiveScoreEntry, OutingLeaderboardEntry

from .outing import SnapshotPayload


class LeaderboardRequest(SnapshotPayload):
    live_scores: Dict[str, Dict[str, LiveScoreEntry]] = Field(default_factory=dict)
    format_id: str = Field(default="stroke_play")


class LeaderboardResponse(BaseModel):
    format_id: str
    scoring: str
    groups_complete: int
    all_groups_complete: bool
    entries: List[OutingLeaderboardEntry]
