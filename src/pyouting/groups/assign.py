"""Split a roster into scoring groups and assign shotgun starting holes."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pyouting.config import default_group_size
from pyouting.models import OutingGroup, OutingPlayer, OutingSnapshot


logger = logging.getLogger(__name__)


def generate_group_id(index: int) -> str:
    return f"group_{index}"


def _pick_marker(chunk: Sequence[OutingPlayer]) -> OutingPlayer:
    for player in chunk:
        if not player.is_ghost:
            return player
    return chunk[0]


def auto_assign_groups(
    roster: Sequence[OutingPlayer],
    group_size: Optional[int] = None,
) -> OutingSnapshot:
    """Chunk the roster in order into groups of at most ``group_size``.

    The first non-ghost player of each chunk becomes its marker; an all-ghost
    chunk falls back to its first player. Every roster player comes back with
    ``group_id`` and ``is_group_marker`` rewritten.
    """

    size = default_group_size() if group_size is None else group_size
    if size < 1:
        raise ValueError(f"group_size must be >= 1, got {size}")

    players = list(roster)
    groups: List[OutingGroup] = []
    updated_roster: List[OutingPlayer] = []

    for index, start in enumerate(range(0, len(players), size), start=1):
        chunk = players[start:start + size]
        group_id = generate_group_id(index)
        marker = _pick_marker(chunk)

        groups.append(
            OutingGroup(
                group_id=group_id,
                name=f"Group {index}",
                player_ids=tuple(player.player_id for player in chunk),
                marker_id=marker.player_id,
            )
        )
        updated_roster.extend(
            player.model_copy(
                update={
                    "group_id": group_id,
                    "is_group_marker": player.player_id == marker.player_id,
                }
            )
            for player in chunk
        )

    logger.debug("Assigned %d players into %d groups of up to %d", len(players), len(groups), size)
    return OutingSnapshot(roster=updated_roster, groups=groups)


def shotgun_assign_starting_holes(
    groups: Sequence[OutingGroup],
    hole_count: int,
    base_hole: int = 1,
) -> List[OutingGroup]:
    """Spread groups across holes cyclically; extra groups double up on a tee."""

    if hole_count < 1:
        raise ValueError(f"hole_count must be >= 1, got {hole_count}")
    if base_hole < 1:
        raise ValueError(f"base_hole must be >= 1, got {base_hole}")

    updated: List[OutingGroup] = []
    for index, group in enumerate(groups):
        hole = base_hole + (index % hole_count)
        updated.append(
            group.model_copy(update={"starting_hole": hole, "name": f"Hole {hole} Start"})
        )
    return updated


def build_playing_order(starting_hole: int, hole_count: int, base_hole: int = 1) -> List[int]:
    """Holes in the order a group starting on ``starting_hole`` plays them."""

    if hole_count < 1:
        raise ValueError(f"hole_count must be >= 1, got {hole_count}")
    if base_hole < 1:
        raise ValueError(f"base_hole must be >= 1, got {base_hole}")
    return [
        ((starting_hole - base_hole + offset) % hole_count) + base_hole
        for offset in range(hole_count)
    ]


__all__ = [
    "auto_assign_groups",
    "build_playing_order",
    "generate_group_id",
    "shotgun_assign_starting_holes",
]
