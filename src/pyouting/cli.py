"""Command-line interface for building outing groups from a roster CSV."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path

from pyouting.config import default_hole_count
from pyouting.config_loader import MappingProfile
from pyouting.groups import (
    auto_assign_groups,
    shotgun_assign_starting_holes,
    validate_outing_setup,
)
from pyouting.ingest import RosterImportError, load_roster_csv


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split an outing roster into scoring groups")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument(
        "--group-size",
        type=_positive_int,
        default=None,
        help="Players per group (default from PYOUTING_GROUP_SIZE, else 4)",
    )
    parser.add_argument(
        "--shotgun",
        action="store_true",
        help="Assign shotgun starting holes and rename groups after their hole",
    )
    parser.add_argument(
        "--holes",
        type=_positive_int,
        default=None,
        help="Hole count for shotgun starts (default from PYOUTING_HOLE_COUNT, else 18)",
    )
    parser.add_argument("--base-hole", type=_positive_int, default=1, help="First hole of the course side")
    parser.add_argument(
        "--roster-column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., name=First|Last)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=Path("groups.csv"), help="Output CSV path")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    roster_mapping = _parse_mapping(args.roster_column)
    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        roster_mapping = profile.roster_mapping | roster_mapping

    try:
        roster = load_roster_csv(args.roster, mapping=roster_mapping or None)
    except RosterImportError as exc:
        print(f"Could not read roster: {exc}")
        return 1

    if args.save_profile:
        MappingProfile(roster_mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    snapshot = auto_assign_groups(roster, args.group_size)
    groups = snapshot.groups
    if args.shotgun:
        holes = args.holes if args.holes is not None else default_hole_count()
        groups = shotgun_assign_starting_holes(groups, holes, args.base_hole)

    names = {player.player_id: player.display_name for player in snapshot.roster}
    with args.output.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["group_id", "name", "starting_hole", "marker", "players"])
        for group in groups:
            writer.writerow([
                group.group_id,
                group.name,
                group.starting_hole,
                names.get(group.marker_id or "", ""),
                " | ".join(names.get(pid, pid) for pid in group.player_ids),
            ])

    print(f"Assigned {len(snapshot.roster)} players into {len(groups)} groups -> {args.output}")
    for warning in validate_outing_setup(snapshot.roster, groups):
        print(f"Warning [{warning.type.value}]: {warning.message}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
