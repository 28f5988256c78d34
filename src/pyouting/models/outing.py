"""Canonical roster and group models shared by the outing engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class GroupStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETE = "complete"


class OutingPlayer(BaseModel):
    """Roster entry for an outing. Ghost players have no platform account."""

    player_id: str = Field(..., min_length=1)
    display_name: str
    avatar: Optional[str] = None
    is_ghost: bool = False
    group_id: Optional[str] = None
    is_group_marker: bool = False
    handicap_index: Optional[float] = None
    contact_info: Optional[str] = None
    contact_type: Optional[Literal["phone", "email"]] = None

    model_config = ConfigDict(frozen=True)


class OutingGroup(BaseModel):
    """Scoring group within an outing; maps 1:1 to a live round once launched."""

    group_id: str = Field(..., min_length=1)
    name: str
    player_ids: Tuple[str, ...] = ()
    marker_id: Optional[str] = None
    round_id: Optional[str] = None
    starting_hole: int = Field(default=1, ge=1)
    status: GroupStatus = GroupStatus.PENDING

    model_config = ConfigDict(frozen=True)

    @field_validator("player_ids")
    @classmethod
    def _unique_player_ids(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("player_ids must not contain duplicates")
        return value


@dataclass(frozen=True)
class OutingSnapshot:
    """Roster and groups returned together by every rewriting operation."""

    roster: List[OutingPlayer]
    groups: List[OutingGroup]
