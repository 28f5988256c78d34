"""Group assignment, validation and leaderboards for multi-group golf outings."""

from pyouting.groups import (
    auto_assign_groups,
    move_player_between_groups,
    reassign_group_marker,
    shotgun_assign_starting_holes,
    validate_outing_setup,
)
from pyouting.leaderboard import build_outing_leaderboard

__all__ = [
    "auto_assign_groups",
    "build_outing_leaderboard",
    "move_player_between_groups",
    "reassign_group_marker",
    "shotgun_assign_starting_holes",
    "validate_outing_setup",
]
