"""Environment-driven defaults for group assignment."""

from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

_GROUP_SIZE_ENV = "PYOUTING_GROUP_SIZE"
_HOLE_COUNT_ENV = "PYOUTING_HOLE_COUNT"

_GROUP_SIZE_DEFAULT = 4
_HOLE_COUNT_DEFAULT = 18


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def default_group_size() -> int:
    return _env_int(_GROUP_SIZE_ENV, _GROUP_SIZE_DEFAULT, min_value=1)


def default_hole_count() -> int:
    return _env_int(_HOLE_COUNT_ENV, _HOLE_COUNT_DEFAULT, min_value=1)
