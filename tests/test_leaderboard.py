import pytest

from pyouting.config import ScoringFormat, UnknownFormatError
from pyouting.leaderboard import build_outing_leaderboard, leaderboard_to_csv
from pyouting.models import LiveScoreEntry, OutingGroup, OutingPlayer


def _roster() -> list[OutingPlayer]:
    return [
        OutingPlayer(player_id=pid, display_name=pid.title(), group_id=gid, avatar=f"{pid}.png")
        for pid, gid in [
            ("ann", "g1"),
            ("bob", "g1"),
            ("cat", "g2"),
            ("dan", "g2"),
            ("eve", "g3"),
        ]
    ]


def _groups(**round_ids: str | None) -> list[OutingGroup]:
    return [
        OutingGroup(group_id="g1", name="Group 1", player_ids=["ann", "bob"], marker_id="ann",
                    round_id=round_ids.get("g1", "r1")),
        OutingGroup(group_id="g2", name="Group 2", player_ids=["cat", "dan"], marker_id="cat",
                    round_id=round_ids.get("g2", "r2")),
        OutingGroup(group_id="g3", name="Group 3", player_ids=["eve"], marker_id="eve",
                    round_id=round_ids.get("g3", "r3")),
    ]


def _score(gross: int, net: int, points: int | None = None, thru: int = 18) -> LiveScoreEntry:
    return LiveScoreEntry(
        current_gross=gross,
        current_net=net,
        score_to_par=gross - 72,
        thru=thru,
        stableford_points=points,
    )


def _positions(entries) -> list[tuple[str, int]]:
    return [(entry.player_id, entry.position) for entry in entries]


def test_stroke_ties_share_position_and_skip_next():
    scores = {
        "r1": {"ann": _score(74, 70), "bob": _score(72, 70)},
        "r2": {"cat": _score(75, 71), "dan": _score(80, 73)},
        "r3": {"eve": _score(73, 71)},
    }

    entries = build_outing_leaderboard(_roster(), _groups(), scores, "stroke_net")

    # Gross breaks the ordering tie but not the position.
    assert _positions(entries) == [("bob", 1), ("ann", 1), ("eve", 3), ("cat", 3), ("dan", 5)]


def test_entries_carry_player_and_group_details():
    scores = {"r1": {"ann": _score(76, 70, thru=9)}}

    (entry,) = build_outing_leaderboard(_roster(), _groups(), scores, "stroke_play")

    assert entry.display_name == "Ann"
    assert entry.avatar == "ann.png"
    assert entry.group_id == "g1"
    assert entry.group_name == "Group 1"
    assert (entry.gross_score, entry.net_score, entry.score_to_par, entry.thru) == (76, 70, 4, 9)
    assert entry.format_score is None


def test_stableford_ranks_highest_points_first():
    scores = {
        "r1": {"ann": _score(80, 72, points=36), "bob": _score(78, 70, points=38)},
        "r2": {"cat": _score(85, 75, points=36), "dan": _score(90, 80, points=30)},
        "r3": {"eve": _score(82, 74, points=None)},
    }

    entries = build_outing_leaderboard(_roster(), _groups(), scores, "stableford")

    assert _positions(entries) == [("bob", 1), ("ann", 2), ("cat", 2), ("dan", 4), ("eve", 5)]
    assert [entry.format_score for entry in entries] == [38, 36, 36, 30, None]


def test_stableford_tie_at_top_skips_to_third():
    scores = {
        "r1": {"ann": _score(80, 72, points=40), "bob": _score(78, 70, points=40)},
        "r2": {"cat": _score(85, 75, points=33)},
    }

    entries = build_outing_leaderboard(_roster(), _groups(), scores, ScoringFormat.STABLEFORD)

    assert _positions(entries) == [("ann", 1), ("bob", 1), ("cat", 3)]


def test_missing_round_or_scores_are_skipped():
    scores = {
        "r1": {"ann": _score(72, 70)},
        "r2": {},
        "r3": {"eve": _score(73, 71)},
    }

    entries = build_outing_leaderboard(_roster(), _groups(g3=None), scores, "stroke_play")

    # g2 has a round but an empty table; g3 has no round yet; bob has no entry.
    assert _positions(entries) == [("ann", 1)]


def test_unknown_round_table_and_unknown_player_are_skipped():
    groups = [
        OutingGroup(group_id="g1", name="Group 1", player_ids=["ann", "ghost"], round_id="r1"),
        OutingGroup(group_id="g2", name="Group 2", player_ids=["cat"], round_id="r9"),
    ]
    scores = {"r1": {"ann": _score(72, 70), "ghost": _score(70, 68)}}

    entries = build_outing_leaderboard(_roster(), groups, scores, "stroke_play")

    assert _positions(entries) == [("ann", 1)]


def test_empty_leaderboard():
    assert build_outing_leaderboard(_roster(), _groups(), {}, "stroke_play") == []


def test_unknown_format_raises():
    with pytest.raises(UnknownFormatError):
        build_outing_leaderboard(_roster(), _groups(), {}, "stableford-ish")


def test_leaderboard_csv_marks_ties():
    scores = {"r1": {"ann": _score(74, 70), "bob": _score(72, 70)}, "r3": {"eve": _score(72, 72)}}
    entries = build_outing_leaderboard(_roster(), _groups(), scores, "stroke_play")

    lines = leaderboard_to_csv(entries).splitlines()

    assert lines[0] == "Position,Player,Group,Gross,Net,ToPar,Thru,Points"
    assert lines[1] == "T1,Bob,Group 1,72,70,E,18,"
    assert lines[2] == "T1,Ann,Group 1,74,70,+2,18,"
    assert lines[3] == "3,Eve,Group 3,72,72,E,18,"


def test_stableford_missing_points_tie_with_zero():
    scores = {
        "r1": {"ann": _score(80, 72, points=5), "bob": _score(90, 82, points=None)},
        "r2": {"cat": _score(95, 85, points=0)},
    }

    entries = build_outing_leaderboard(_roster(), _groups(), scores, "stableford")

    assert [(e.player_id, e.format_score, e.position) for e in entries] == [
        ("ann", 5, 1),
        ("bob", None, 2),
        ("cat", 0, 2),
    ]
