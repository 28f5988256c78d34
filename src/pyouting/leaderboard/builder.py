"""Combine per-round live scores into one ranked outing leaderboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence, Union

from pyouting.config import ScoringFormat, resolve_scoring
from pyouting.models import (
    LiveScoreEntry,
    OutingGroup,
    OutingLeaderboardEntry,
    OutingPlayer,
)


logger = logging.getLogger(__name__)

LiveScoresByRound = Mapping[str, Mapping[str, LiveScoreEntry]]


@dataclass(frozen=True)
class _Row:
    player: OutingPlayer
    group: OutingGroup
    score: LiveScoreEntry

    @property
    def points(self) -> int:
        # Missing points rank and tie as 0 so sort order and positions agree.
        return self.score.stableford_points or 0


def _collect_rows(
    roster: Sequence[OutingPlayer],
    groups: Sequence[OutingGroup],
    live_scores_by_round: LiveScoresByRound,
) -> List[_Row]:
    players_by_id = {player.player_id: player for player in roster}
    rows: List[_Row] = []
    for group in groups:
        if not group.round_id:
            continue
        round_scores = live_scores_by_round.get(group.round_id)
        if not round_scores:
            logger.debug("No live scores yet for round %s (group %s)", group.round_id, group.group_id)
            continue
        for player_id in group.player_ids:
            player = players_by_id.get(player_id)
            score = round_scores.get(player_id)
            if player is None or score is None:
                continue
            rows.append(_Row(player=player, group=group, score=score))
    return rows


def _ranking(scoring: ScoringFormat) -> tuple[Callable[[_Row], tuple], Callable[[_Row], int]]:
    """Return (sort key, tie key) for a scoring format."""

    if scoring is ScoringFormat.STABLEFORD:
        return (lambda row: (-row.points,)), (lambda row: row.points)
    if scoring is ScoringFormat.STROKE:
        return (
            (lambda row: (row.score.current_net, row.score.current_gross)),
            (lambda row: row.score.current_net),
        )
    raise ValueError(f"Unhandled scoring format: {scoring!r}")


def build_outing_leaderboard(
    roster: Sequence[OutingPlayer],
    groups: Sequence[OutingGroup],
    live_scores_by_round: LiveScoresByRound,
    format_id: Union[str, ScoringFormat],
) -> List[OutingLeaderboardEntry]:
    """Rank every scored player across all launched groups.

    Groups without a round and players without a score entry are skipped.
    Positions use competition ranking on the primary key only (net strokes
    or Stableford points): ties share a position and the next distinct entry
    takes its 1-based index, so two players tied at 1 are followed by 3.
    """

    scoring = resolve_scoring(format_id)
    sort_key, tie_key = _ranking(scoring)
    rows = sorted(_collect_rows(roster, groups, live_scores_by_round), key=sort_key)

    entries: List[OutingLeaderboardEntry] = []
    previous: Optional[_Row] = None
    position = 0
    for index, row in enumerate(rows, start=1):
        if previous is None or tie_key(row) != tie_key(previous):
            position = index
        previous = row
        entries.append(
            OutingLeaderboardEntry(
                player_id=row.player.player_id,
                display_name=row.player.display_name,
                avatar=row.player.avatar,
                group_id=row.group.group_id,
                group_name=row.group.name,
                gross_score=row.score.current_gross,
                net_score=row.score.current_net,
                score_to_par=row.score.score_to_par,
                thru=row.score.thru,
                format_score=row.score.stableford_points,
                position=position,
            )
        )
    return entries


__all__ = ["LiveScoresByRound", "build_outing_leaderboard"]
