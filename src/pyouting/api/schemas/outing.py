from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pyouting.models import OutingGroup, OutingPlayer, OutingValidationWarning


class SnapshotPayload(BaseModel):
    roster: List[OutingPlayer]
    groups: List[OutingGroup] = Field(default_factory=list)


class AutoAssignRequest(BaseModel):
    roster: List[OutingPlayer] = Field(..., min_length=1)
    group_size: int | None = Field(default=None, ge=1)
    shotgun_holes: int | None = Field(default=None, ge=1)
    base_hole: int = Field(default=1, ge=1)


class MovePlayerRequest(SnapshotPayload):
    player_id: str
    target_group_id: str


class MarkerRequest(SnapshotPayload):
    group_id: str
    marker_id: str


class SnapshotResponse(BaseModel):
    roster: List[OutingPlayer]
    groups: List[OutingGroup]
    warnings: List[OutingValidationWarning]


class ValidationResponse(BaseModel):
    warnings: List[OutingValidationWarning]


class LaunchCheckResponse(BaseModel):
    ready: bool
    message: str | None = None
    warnings: List[OutingValidationWarning] = Field(default_factory=list)
