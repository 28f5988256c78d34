"""CSV export helpers for outing standings."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from pyouting.models import OutingLeaderboardEntry


LEADERBOARD_HEADERS: tuple[str, ...] = (
    "Position",
    "Player",
    "Group",
    "Gross",
    "Net",
    "ToPar",
    "Thru",
    "Points",
)


def _position_label(entry: OutingLeaderboardEntry, entries: Sequence[OutingLeaderboardEntry]) -> str:
    tied = sum(1 for other in entries if other.position == entry.position) > 1
    return f"T{entry.position}" if tied else str(entry.position)


def _to_par_label(score_to_par: int) -> str:
    if score_to_par == 0:
        return "E"
    return f"{score_to_par:+d}"


def leaderboard_to_csv(entries: Sequence[OutingLeaderboardEntry]) -> str:
    """Render ranked entries as CSV, marking shared positions with a ``T`` prefix."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(LEADERBOARD_HEADERS)

    for entry in entries:
        writer.writerow([
            _position_label(entry, entries),
            entry.display_name,
            entry.group_name,
            entry.gross_score,
            entry.net_score,
            _to_par_label(entry.score_to_par),
            entry.thru,
            "" if entry.format_score is None else entry.format_score,
        ])

    return buffer.getvalue()


__all__ = ["LEADERBOARD_HEADERS", "leaderboard_to_csv"]
