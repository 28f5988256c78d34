"""Leaderboard aggregation and export."""

from .builder import LiveScoresByRound, build_outing_leaderboard
from .export import LEADERBOARD_HEADERS, leaderboard_to_csv

__all__ = [
    "LEADERBOARD_HEADERS",
    "LiveScoresByRound",
    "build_outing_leaderboard",
    "leaderboard_to_csv",
]
