import pytest

from pyouting.groups import (
    OutingLaunchError,
    auto_assign_groups,
    ensure_launchable,
    validate_outing_setup,
)
from pyouting.models import OutingGroup, OutingPlayer, WarningType


def _roster(count: int, ghosts: set[int] | None = None) -> list[OutingPlayer]:
    ghosts = ghosts or set()
    return [
        OutingPlayer(player_id=f"p{i}", display_name=f"Player {i}", is_ghost=i in ghosts)
        for i in range(1, count + 1)
    ]


def _types(warnings) -> list[WarningType]:
    return [warning.type for warning in warnings]


def test_clean_setup_has_no_warnings():
    snapshot = auto_assign_groups(_roster(8), 4)
    assert validate_outing_setup(snapshot.roster, snapshot.groups) == []


def test_nine_players_in_fours_flags_the_single():
    snapshot = auto_assign_groups(_roster(9), 4)

    warnings = validate_outing_setup(snapshot.roster, snapshot.groups)

    small = [w for w in warnings if w.type is WarningType.SMALL_GROUP]
    assert [w.group_id for w in small] == ["group_3"]
    assert small[0].message == "Group 3: Only 1 player"
    assert WarningType.NO_MARKER not in _types(warnings)
    # Sizes [4, 4, 1] also differ by more than one.
    assert WarningType.UNEVEN_GROUP in _types(warnings)


def test_lone_ghost_group_reports_every_problem():
    snapshot = auto_assign_groups(_roster(9, ghosts={9}), 4)

    warnings = validate_outing_setup(snapshot.roster, snapshot.groups)
    group_three = [w.type for w in warnings if w.group_id == "group_3"]

    assert group_three == [WarningType.GHOST_MARKER, WarningType.NO_MARKER, WarningType.SMALL_GROUP]
    ghost = next(w for w in warnings if w.type is WarningType.GHOST_MARKER)
    assert ghost.message == 'Group 3: Marker "Player 9" is a ghost player and cannot score'


def test_unassigned_players_reported_once():
    roster = _roster(5)
    snapshot = auto_assign_groups(roster[:3], 3)
    full_roster = [*snapshot.roster, *roster[3:]]

    warnings = validate_outing_setup(full_roster, snapshot.groups)

    unassigned = [w for w in warnings if w.type is WarningType.UNASSIGNED_PLAYERS]
    assert len(unassigned) == 1
    assert unassigned[0].group_id is None
    assert unassigned[0].message == "2 players not assigned to a group"


@pytest.mark.parametrize("sizes,uneven", [((5, 3), True), ((4, 4), False), ((4, 3), False)])
def test_uneven_group_threshold(sizes, uneven):
    roster = _roster(sum(sizes))
    groups = []
    start = 0
    for index, size in enumerate(sizes, start=1):
        ids = [player.player_id for player in roster[start:start + size]]
        groups.append(OutingGroup(group_id=f"g{index}", name=f"G{index}", player_ids=ids, marker_id=ids[0]))
        start += size
    roster = [p.model_copy(update={"group_id": "assigned"}) for p in roster]

    warnings = validate_outing_setup(roster, groups)

    assert (WarningType.UNEVEN_GROUP in _types(warnings)) is uneven
    if uneven:
        assert warnings[-1].message == "Uneven groups: sizes range from 3 to 5"


def test_no_groups_means_no_group_warnings():
    assert validate_outing_setup([], []) == []


def test_ensure_launchable_accepts_clean_setup():
    snapshot = auto_assign_groups(_roster(6), 3)
    ensure_launchable(snapshot.roster, snapshot.groups)


def test_ensure_launchable_rejects_ghost_scorer():
    snapshot = auto_assign_groups(_roster(3, ghosts={3}), 2)
    with pytest.raises(OutingLaunchError, match="scorer cannot be a guest"):
        ensure_launchable(snapshot.roster, snapshot.groups)


def test_ensure_launchable_rejects_markerless_group():
    roster = _roster(2)
    groups = [OutingGroup(group_id="g1", name="Group 1", player_ids=["p1", "p2"])]
    with pytest.raises(OutingLaunchError, match="no designated scorer"):
        ensure_launchable(roster, groups)


def test_ensure_launchable_needs_players_and_groups():
    with pytest.raises(OutingLaunchError):
        ensure_launchable(_roster(1), [])
    with pytest.raises(OutingLaunchError, match="at least 1 group"):
        ensure_launchable(_roster(2), [])
