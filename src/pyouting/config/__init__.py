"""Configuration helpers for scoring formats and assignment defaults."""

from .formats import (
    FormatRules,
    ScoringFormat,
    UnknownFormatError,
    get_format,
    iter_formats,
    resolve_scoring,
)
from .settings import default_group_size, default_hole_count

__all__ = [
    "FormatRules",
    "ScoringFormat",
    "UnknownFormatError",
    "default_group_size",
    "default_hole_count",
    "get_format",
    "iter_formats",
    "resolve_scoring",
]
