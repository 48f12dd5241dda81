"""Periodic report of every selectable object's position and selection.

Timing is frame-based: the interval in seconds is converted to a frame count
once, so the report cadence follows pipeline ticks rather than wall-clock time.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TYPE_CHECKING

from marquee.selection import Selectable, require_collection

if TYPE_CHECKING:
    from marquee.pipeline import TickContext


def seconds_to_frames(seconds: float, fps: float = 60.0) -> int:
    """Convert seconds to an approximate frame count."""
    return round(seconds * fps)


def format_report_line(obj: Selectable) -> str:
    name = getattr(obj, "name", "") or type(obj).__name__
    return f"name: {name}, position: {obj.center_x:g} {obj.center_y:g}, selected: {obj.selected}"


class SelectionReporter:
    """Pipeline stage printing one line per object every ``interval`` seconds.

    Args:
        objects: Objects to report on. Re-read on every report, so generators are rejected.
        interval: Seconds between reports, at ``fps`` ticks per second.
        fps: Tick rate used to convert ``interval`` to frames.
        output: Line sink, ``print`` by default.
    """

    def __init__(
        self,
        objects: Collection[Selectable],
        interval: float = 2.0,
        fps: float = 60.0,
        output: Callable[[str], None] = print,
    ):
        self.objects = require_collection(objects, "SelectionReporter")
        self.interval_frames = max(1, seconds_to_frames(interval, fps))
        self.output = output
        self._frames_elapsed = 0

    def __call__(self, ctx: TickContext) -> None:
        self._frames_elapsed += 1
        if self._frames_elapsed < self.interval_frames:
            return
        self._frames_elapsed = 0
        for obj in self.objects:
            self.output(format_report_line(obj))
