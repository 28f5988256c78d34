"""Lightweight REST client for the pyouting API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx

from pyouting.ingest import load_roster_csv


def load_json(path: Path | None) -> dict:
    if path is None:
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyouting REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV")
    parser.add_argument("--group-size", type=int, default=None, help="Players per group")
    parser.add_argument("--shotgun-holes", type=int, default=None, help="Assign shotgun starts over N holes")
    parser.add_argument("--snapshot", type=Path, help="Roster/groups JSON snapshot for leaderboard requests")
    parser.add_argument("--live-scores", type=Path, help="Live score JSON keyed by round then player")
    parser.add_argument("--format-id", default="stroke_play", help="Scoring format id")
    parser.add_argument("--export-path", type=Path, help="Write leaderboard CSV to this path")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.snapshot:
            snapshot = load_json(args.snapshot)
            payload = {
                "roster": snapshot.get("roster", []),
                "groups": snapshot.get("groups", []),
                "live_scores": load_json(args.live_scores),
                "format_id": args.format_id,
            }
            if args.export_path:
                resp = client.post("/leaderboard/export.csv", json=payload)
                resp.raise_for_status()
                args.export_path.write_text(resp.text, encoding="utf-8")
                print(f"Leaderboard CSV saved to {args.export_path}")
                return
            resp = client.post("/leaderboard", json=payload)
            if resp.status_code == 400:
                raise SystemExit(resp.json()["detail"])
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            raise SystemExit("roster CSV is required unless using --snapshot")

        roster = [player.model_dump(mode="json") for player in load_roster_csv(args.roster)]
        resp = client.post(
            "/groups/auto-assign",
            json={
                "roster": roster,
                "group_size": args.group_size,
                "shotgun_holes": args.shotgun_holes,
            },
        )
        resp.raise_for_status()
        payload = resp.json()
        for group in payload["groups"]:
            print(f"{group['name']}: {', '.join(group['player_ids'])} (marker {group['marker_id']})")
        for warning in payload["warnings"]:
            print(f"Warning [{warning['type']}]: {warning['message']}")


if __name__ == "__main__":
    main()
