"""Advisory setup warnings and the blocking pre-launch check."""

from __future__ import annotations

from typing import List, Sequence

from pyouting.models import (
    OutingGroup,
    OutingPlayer,
    OutingValidationWarning,
    WarningType,
)


MIN_GROUP_SIZE = 2
MAX_GROUP_SIZE_SPREAD = 1
MIN_LAUNCH_PLAYERS = 2


class OutingLaunchError(RuntimeError):
    """Raised when a roster/group snapshot cannot be launched."""


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def validate_outing_setup(
    roster: Sequence[OutingPlayer],
    groups: Sequence[OutingGroup],
) -> List[OutingValidationWarning]:
    """Return warnings for the organizer; nothing here blocks a launch.

    A single group may produce several warnings at once.
    """

    warnings: List[OutingValidationWarning] = []
    players_by_id = {player.player_id: player for player in roster}

    unassigned = [player for player in roster if not player.group_id]
    if unassigned:
        warnings.append(
            OutingValidationWarning(
                type=WarningType.UNASSIGNED_PLAYERS,
                message=f"{_plural(len(unassigned), 'player')} not assigned to a group",
            )
        )

    for group in groups:
        marker = players_by_id.get(group.marker_id) if group.marker_id else None
        if marker is not None and marker.is_ghost:
            warnings.append(
                OutingValidationWarning(
                    type=WarningType.GHOST_MARKER,
                    group_id=group.group_id,
                    message=(
                        f'{group.name}: Marker "{marker.display_name}" is a ghost player '
                        "and cannot score"
                    ),
                )
            )

        has_scorer = any(
            pid in players_by_id and not players_by_id[pid].is_ghost
            for pid in group.player_ids
        )
        if not has_scorer:
            warnings.append(
                OutingValidationWarning(
                    type=WarningType.NO_MARKER,
                    group_id=group.group_id,
                    message=f"{group.name}: No on-platform player available to score",
                )
            )

        if len(group.player_ids) < MIN_GROUP_SIZE:
            warnings.append(
                OutingValidationWarning(
                    type=WarningType.SMALL_GROUP,
                    group_id=group.group_id,
                    message=f"{group.name}: Only {_plural(len(group.player_ids), 'player')}",
                )
            )

    sizes = [len(group.player_ids) for group in groups]
    if sizes and max(sizes) - min(sizes) > MAX_GROUP_SIZE_SPREAD:
        warnings.append(
            OutingValidationWarning(
                type=WarningType.UNEVEN_GROUP,
                message=f"Uneven groups: sizes range from {min(sizes)} to {max(sizes)}",
            )
        )

    return warnings


def ensure_launchable(
    roster: Sequence[OutingPlayer],
    groups: Sequence[OutingGroup],
) -> None:
    """Raise OutingLaunchError if the snapshot is not ready to start rounds."""

    if len(roster) < MIN_LAUNCH_PLAYERS:
        raise OutingLaunchError(f"Outing requires at least {MIN_LAUNCH_PLAYERS} players.")
    if not groups:
        raise OutingLaunchError("Outing requires at least 1 group.")

    players_by_id = {player.player_id: player for player in roster}
    for group in groups:
        if not group.marker_id:
            raise OutingLaunchError(f'Group "{group.name}" has no designated scorer.')
        marker = players_by_id.get(group.marker_id)
        if marker is not None and marker.is_ghost:
            raise OutingLaunchError(f'Group "{group.name}" scorer cannot be a guest player.')


__all__ = [
    "OutingLaunchError",
    "ensure_launchable",
    "validate_outing_setup",
]
