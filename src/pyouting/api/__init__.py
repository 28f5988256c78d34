"""Stateless REST API over the outing engine.

Every endpoint takes the full roster/group snapshot in the request body and
returns a new one; nothing is stored between calls.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from pyouting.api.schemas import (
    AutoAssignRequest,
    LaunchCheckResponse,
    LeaderboardRequest,
    LeaderboardResponse,
    MarkerRequest,
    MovePlayerRequest,
    SnapshotPayload,
    SnapshotResponse,
    ValidationResponse,
)
from pyouting.config import UnknownFormatError, resolve_scoring
from pyouting.groups import (
    GroupNotFoundError,
    MarkerNotInGroupError,
    OutingLaunchError,
    are_all_groups_complete,
    auto_assign_groups,
    completed_group_count,
    ensure_launchable,
    move_player_between_groups,
    reassign_group_marker,
    shotgun_assign_starting_holes,
    validate_outing_setup,
)
from pyouting.leaderboard import build_outing_leaderboard, leaderboard_to_csv
from pyouting.models import OutingSnapshot


logger = logging.getLogger("uvicorn.error")


def _snapshot_response(snapshot: OutingSnapshot) -> SnapshotResponse:
    return SnapshotResponse(
        roster=snapshot.roster,
        groups=snapshot.groups,
        warnings=validate_outing_setup(snapshot.roster, snapshot.groups),
    )


def _error_detail(exc: KeyError) -> str:
    # KeyError wraps its message in quotes when str()'d.
    return str(exc.args[0]) if exc.args else str(exc)


def create_app() -> FastAPI:
    app = FastAPI(title="pyouting engine")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/groups/auto-assign", response_model=SnapshotResponse)
    async def auto_assign(payload: AutoAssignRequest) -> SnapshotResponse:
        snapshot = auto_assign_groups(payload.roster, payload.group_size)
        if payload.shotgun_holes is not None:
            snapshot = OutingSnapshot(
                roster=snapshot.roster,
                groups=shotgun_assign_starting_holes(
                    snapshot.groups, payload.shotgun_holes, payload.base_hole
                ),
            )
        logger.info(
            "Auto-assigned %d players into %d groups",
            len(snapshot.roster),
            len(snapshot.groups),
        )
        return _snapshot_response(snapshot)

    @app.post("/groups/move", response_model=SnapshotResponse)
    async def move_player(payload: MovePlayerRequest) -> SnapshotResponse:
        try:
            snapshot = move_player_between_groups(
                payload.roster, payload.groups, payload.player_id, payload.target_group_id
            )
        except GroupNotFoundError as exc:
            raise HTTPException(status_code=404, detail=_error_detail(exc)) from exc
        return _snapshot_response(snapshot)

    @app.post("/groups/marker", response_model=SnapshotResponse)
    async def reassign_marker(payload: MarkerRequest) -> SnapshotResponse:
        try:
            snapshot = reassign_group_marker(
                payload.roster, payload.groups, payload.group_id, payload.marker_id
            )
        except GroupNotFoundError as exc:
            raise HTTPException(status_code=404, detail=_error_detail(exc)) from exc
        except MarkerNotInGroupError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _snapshot_response(snapshot)

    @app.post("/validate", response_model=ValidationResponse)
    async def validate(payload: SnapshotPayload) -> ValidationResponse:
        return ValidationResponse(warnings=validate_outing_setup(payload.roster, payload.groups))

    @app.post("/launch-check", response_model=LaunchCheckResponse)
    async def launch_check(payload: SnapshotPayload) -> LaunchCheckResponse:
        warnings = validate_outing_setup(payload.roster, payload.groups)
        try:
            ensure_launchable(payload.roster, payload.groups)
        except OutingLaunchError as exc:
            return LaunchCheckResponse(ready=False, message=str(exc), warnings=warnings)
        return LaunchCheckResponse(ready=True, warnings=warnings)

    def _leaderboard(payload: LeaderboardRequest):
        try:
            scoring = resolve_scoring(payload.format_id)
        except UnknownFormatError as exc:
            raise HTTPException(status_code=400, detail=_error_detail(exc)) from exc
        entries = build_outing_leaderboard(
            payload.roster, payload.groups, payload.live_scores, scoring
        )
        return scoring, entries

    @app.post("/leaderboard", response_model=LeaderboardResponse)
    async def leaderboard(payload: LeaderboardRequest) -> LeaderboardResponse:
        scoring, entries = _leaderboard(payload)
        return LeaderboardResponse(
            format_id=payload.format_id,
            scoring=scoring.value,
            groups_complete=completed_group_count(payload.groups),
            all_groups_complete=are_all_groups_complete(payload.groups),
            entries=entries,
        )

    @app.post("/leaderboard/export.csv")
    async def leaderboard_csv(payload: LeaderboardRequest) -> Response:
        _, entries = _leaderboard(payload)
        return Response(
            content=leaderboard_to_csv(entries),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="leaderboard.csv"'},
        )

    return app


__all__ = ["create_app"]
