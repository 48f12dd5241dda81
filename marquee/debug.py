"""Level-gated debug logging for the marquee pipeline.

Debug lines are printed with a ``[MQ L{level} {stage}]`` prefix. Output is
controlled by class-level options on :class:`DebugOptions`:

- ``level``: 0 disables everything, 1 logs drag lifecycle, 2 adds per-tick
  summaries, 3 traces individual pointer events.
- ``include_all``: log every stage regardless of the include filter.
- ``include``: set of stage names to log when ``include_all`` is False.

Examples:
    set_debug_options(level=1, include_all=True)
    observe_stages("aggregator", "selection")
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

DEBUG_ENV_VAR = "MARQUEE_DEBUG"


class DebugOptions:
    """Process-wide debug configuration."""

    level: int = 0
    include_all: bool = False
    include: set[str] | None = None


def set_debug_options(
    *, level: int | None = None, include_all: bool | None = None, include: Iterable[str] | None = None
) -> None:
    """Update debug options. Arguments left as None keep their current value, except ``include``."""
    if level is not None:
        DebugOptions.level = int(level)
    if include_all is not None:
        DebugOptions.include_all = bool(include_all)
    DebugOptions.include = set(include) if include is not None else None


def get_debug_options() -> dict[str, Any]:
    return {
        "level": DebugOptions.level,
        "include_all": DebugOptions.include_all,
        "include": set(DebugOptions.include) if DebugOptions.include else set(),
    }


def observe_stages(*names: str) -> None:
    """Add stage names to the include filter."""
    if DebugOptions.include is None:
        DebugOptions.include = set()
    DebugOptions.include.update(names)


def clear_observed_stages() -> None:
    DebugOptions.include = None


def is_enabled(stage: str, level: int) -> bool:
    if DebugOptions.level < level:
        return False
    if DebugOptions.include_all:
        return True
    return bool(DebugOptions.include) and stage in DebugOptions.include


def debug_log(message: str, *, stage: str, level: int = 1) -> None:
    """Print a debug line for ``stage`` when the configured level and filter allow it."""
    if is_enabled(stage, level):
        print(f"[MQ L{level} {stage}] {message}")


def apply_env_debug_level() -> bool:
    """Enable debug output for all stages if MARQUEE_DEBUG holds a level.

    Returns:
        True if the environment variable was set and applied.
    """
    raw = os.environ.get(DEBUG_ENV_VAR)
    if not raw:
        return False
    try:
        level = int(raw)
    except ValueError:
        import sys

        print(f"[Marquee] Ignoring {DEBUG_ENV_VAR}={raw!r}: expected an integer level", file=sys.stderr)
        return False
    set_debug_options(level=level, include_all=True)
    return True
