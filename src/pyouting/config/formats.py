"""Scoring format registry used to rank outing leaderboards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Union


class ScoringFormat(str, Enum):
    STROKE = "stroke"
    STABLEFORD = "stableford"


class UnknownFormatError(KeyError):
    """Raised when a format id is not in the registry."""


@dataclass(frozen=True)
class FormatRules:
    format_id: str
    name: str
    scoring: ScoringFormat


_FORMATS: Dict[str, FormatRules] = {
    rules.format_id: rules
    for rules in (
        FormatRules("stroke_play", "Stroke Play", ScoringFormat.STROKE),
        FormatRules("stroke_net", "Stroke Play (Net)", ScoringFormat.STROKE),
        FormatRules("stroke_gross", "Stroke Play (Gross)", ScoringFormat.STROKE),
        FormatRules("low_net_stroke", "Low Net (Stroke Play)", ScoringFormat.STROKE),
        FormatRules("low_scratch_stroke", "Low Scratch (Stroke Play)", ScoringFormat.STROKE),
        FormatRules("better_ball_stroke", "Better Ball (Stroke Play)", ScoringFormat.STROKE),
        FormatRules("best_ball_stroke", "Best Ball (Stroke Play)", ScoringFormat.STROKE),
        FormatRules("stableford", "Stableford", ScoringFormat.STABLEFORD),
        FormatRules("better_ball_stableford", "Better Ball (Stableford)", ScoringFormat.STABLEFORD),
        FormatRules("best_ball_stableford", "Best Ball (Stableford)", ScoringFormat.STABLEFORD),
    )
}


def iter_formats() -> Iterable[FormatRules]:
    """Return an iterator of all registered formats."""

    return _FORMATS.values()


def get_format(format_id: str) -> FormatRules:
    """Fetch rules for a format id, raising UnknownFormatError if missing."""

    key = format_id.strip().lower()
    if key not in _FORMATS:
        raise UnknownFormatError(f"No scoring format configured for format_id={format_id!r}")
    return _FORMATS[key]


def resolve_scoring(format_id: Union[str, ScoringFormat]) -> ScoringFormat:
    """Resolve either a registered format id or a ScoringFormat member."""

    if isinstance(format_id, ScoringFormat):
        return format_id
    if not isinstance(format_id, str):
        raise TypeError("format_id must be a str or ScoringFormat")
    return get_format(format_id).scoring

