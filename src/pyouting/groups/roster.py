"""Roster mutations that keep group membership and marker flags in sync."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from pyouting.models import GroupStatus, OutingGroup, OutingPlayer, OutingSnapshot


logger = logging.getLogger(__name__)


class GroupNotFoundError(KeyError):
    """Raised when a group id does not match any group in the snapshot."""


class MarkerNotInGroupError(ValueError):
    """Raised when a marker is assigned to a group it is not a member of."""


def _find_group(groups: Sequence[OutingGroup], group_id: str) -> OutingGroup:
    for group in groups:
        if group.group_id == group_id:
            return group
    raise GroupNotFoundError(f"No group with group_id={group_id!r}")


def _next_marker(
    player_ids: Sequence[str],
    players_by_id: Dict[str, OutingPlayer],
) -> Optional[str]:
    if not player_ids:
        return None
    for player_id in player_ids:
        player = players_by_id.get(player_id)
        if player is not None and not player.is_ghost:
            return player_id
    return player_ids[0]


def move_player_between_groups(
    roster: Sequence[OutingPlayer],
    groups: Sequence[OutingGroup],
    player_id: str,
    target_group_id: str,
) -> OutingSnapshot:
    """Move ``player_id`` into ``target_group_id`` and return a new snapshot.

    The moved player never arrives as marker. A group that loses its marker
    promotes its first remaining non-ghost member, then any remaining member,
    and is left without a marker once empty.
    """

    target = _find_group(groups, target_group_id)
    if player_id in target.player_ids:
        return OutingSnapshot(roster=list(roster), groups=list(groups))

    players_by_id = {player.player_id: player for player in roster}
    promoted: set[str] = set()
    updated_groups: List[OutingGroup] = []

    for group in groups:
        remaining = tuple(pid for pid in group.player_ids if pid != player_id)
        if group.group_id == target_group_id:
            updated_groups.append(group.model_copy(update={"player_ids": (*remaining, player_id)}))
        elif len(remaining) != len(group.player_ids):
            update: dict = {"player_ids": remaining}
            if group.marker_id == player_id:
                new_marker = _next_marker(remaining, players_by_id)
                update["marker_id"] = new_marker
                if new_marker is not None:
                    promoted.add(new_marker)
                logger.debug(
                    "Group %s lost marker %s; new marker %s",
                    group.group_id,
                    player_id,
                    new_marker,
                )
            updated_groups.append(group.model_copy(update=update))
        else:
            updated_groups.append(group)

    updated_roster: List[OutingPlayer] = []
    for player in roster:
        if player.player_id == player_id:
            updated_roster.append(
                player.model_copy(update={"group_id": target_group_id, "is_group_marker": False})
            )
        elif player.player_id in promoted:
            updated_roster.append(player.model_copy(update={"is_group_marker": True}))
        else:
            updated_roster.append(player)

    return OutingSnapshot(roster=updated_roster, groups=updated_groups)


def reassign_group_marker(
    roster: Sequence[OutingPlayer],
    groups: Sequence[OutingGroup],
    group_id: str,
    new_marker_id: str,
) -> OutingSnapshot:
    """Make ``new_marker_id`` the scorer of ``group_id``.

    Raises MarkerNotInGroupError when the player is not a member of the group.
    Ghost markers are allowed here; ``validate_outing_setup`` flags them.
    """

    group = _find_group(groups, group_id)
    if new_marker_id not in group.player_ids:
        raise MarkerNotInGroupError(
            f"Player {new_marker_id!r} is not a member of group {group_id!r}"
        )

    members = set(group.player_ids)
    updated_roster = [
        player.model_copy(update={"is_group_marker": player.player_id == new_marker_id})
        if player.player_id in members
        else player
        for player in roster
    ]
    updated_groups = [
        candidate.model_copy(update={"marker_id": new_marker_id})
        if candidate.group_id == group_id
        else candidate
        for candidate in groups
    ]
    return OutingSnapshot(roster=updated_roster, groups=updated_groups)


def get_unassigned_players(roster: Sequence[OutingPlayer]) -> List[OutingPlayer]:
    return [player for player in roster if not player.group_id]


def get_group_players(roster: Sequence[OutingPlayer], group_id: str) -> List[OutingPlayer]:
    return [player for player in roster if player.group_id == group_id]


def are_all_groups_complete(groups: Sequence[OutingGroup]) -> bool:
    return bool(groups) and all(group.status == GroupStatus.COMPLETE for group in groups)


def completed_group_count(groups: Sequence[OutingGroup]) -> int:
    return sum(1 for group in groups if group.status == GroupStatus.COMPLETE)


__all__ = [
    "GroupNotFoundError",
    "MarkerNotInGroupError",
    "are_all_groups_complete",
    "completed_group_count",
    "get_group_players",
    "get_unassigned_players",
    "move_player_between_groups",
    "reassign_group_marker",
]
