"""Group assignment, roster mutation and setup validation."""

from .assign import (
    auto_assign_groups,
    build_playing_order,
    generate_group_id,
    shotgun_assign_starting_holes,
)
from .roster import (
    GroupNotFoundError,
    MarkerNotInGroupError,
    are_all_groups_complete,
    completed_group_count,
    get_group_players,
    get_unassigned_players,
    move_player_between_groups,
    reassign_group_marker,
)
from .validation import OutingLaunchError, ensure_launchable, validate_outing_setup

__all__ = [
    "GroupNotFoundError",
    "MarkerNotInGroupError",
    "OutingLaunchError",
    "are_all_groups_complete",
    "auto_assign_groups",
    "build_playing_order",
    "completed_group_count",
    "ensure_launchable",
    "generate_group_id",
    "get_group_players",
    "get_unassigned_players",
    "move_player_between_groups",
    "reassign_group_marker",
    "shotgun_assign_starting_holes",
    "validate_outing_setup",
]
