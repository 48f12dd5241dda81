"""Ordered per-tick pipeline driving marquee selection.

Each tick runs the stages in a fixed order on one :class:`TickContext`:

1. pointer aggregation (press, move, release; finalizes the drag box)
2. outline sync (creates, updates or removes the four outline edges)
3. selection (applies a finalized box once, then clears it)

followed by any extra stages added with :meth:`MarqueePipeline.add_stage`.
A stage finishes before the next one starts, so later stages always see the
pointer state written earlier in the same tick.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Collection, Iterable, Sequence
from dataclasses import dataclass

from marquee.aggregator import aggregate_pointer_events
from marquee.config import MarqueeConfig
from marquee.debug import debug_log
from marquee.events import PointerEvent
from marquee.geometry import Viewport, viewport_from_window
from marquee.outline import OutlineRenderer
from marquee.selection import Selectable, apply_selection, draw_selection_highlights, require_collection
from marquee.state import PointerState

Stage = Callable[["TickContext"], None]


@dataclass
class TickContext:
    """Everything a stage may read or write during one tick."""

    pointer: PointerState
    selectables: Collection[Selectable]
    outline: OutlineRenderer
    config: MarqueeConfig
    events: Sequence[PointerEvent] = ()
    viewport: Viewport | None = None
    delta_time: float = 0.0
    selected_count: int | None = None


def aggregate_stage(ctx: TickContext) -> None:
    aggregate_pointer_events(ctx.pointer, ctx.events, button=ctx.config.button)


def outline_stage(ctx: TickContext) -> None:
    ctx.outline.sync(ctx.pointer.drag, ctx.viewport)


def selection_stage(ctx: TickContext) -> None:
    ctx.selected_count = apply_selection(ctx.pointer, ctx.selectables, ctx.viewport)


CORE_STAGES: tuple[Stage, ...] = (aggregate_stage, outline_stage, selection_stage)


class MarqueePipeline:
    """Owns the pointer state and outline, and runs the stages once per tick.

    Args:
        selectables: Objects eligible for selection, e.g. an ``arcade.SpriteList``.
            Iterated on every tick, so generators are rejected.
        config: Settings; defaults to ``MarqueeConfig()``.
        viewport_provider: Returns the current viewport or None. Defaults to
            the active Arcade window's size.
    """

    def __init__(
        self,
        selectables: Collection[Selectable],
        config: MarqueeConfig | None = None,
        viewport_provider: Callable[[], Viewport | None] | None = None,
    ):
        self.selectables = require_collection(selectables, "MarqueePipeline")
        self.config = config or MarqueeConfig()
        self.pointer = PointerState()
        self.outline = OutlineRenderer(self.config.outline_thickness, self.config.outline_color)
        self.viewport_provider = viewport_provider or viewport_from_window
        self._extra_stages: list[Stage] = []
        self.tick_count = 0

    @property
    def stages(self) -> tuple[Stage, ...]:
        return CORE_STAGES + tuple(self._extra_stages)

    def add_stage(self, stage: Stage) -> None:
        """Run ``stage`` after the core stages on every tick."""
        self._extra_stages.append(stage)

    def tick(self, events: Iterable[PointerEvent] = (), delta_time: float = 0.0) -> TickContext:
        """Run one tick over ``events`` and return the context the stages saw."""
        ctx = TickContext(
            pointer=self.pointer,
            selectables=self.selectables,
            outline=self.outline,
            config=self.config,
            events=tuple(events),
            viewport=self.viewport_provider(),
            delta_time=delta_time,
        )
        self.tick_count += 1
        for stage in self.stages:
            stage(ctx)
        if ctx.selected_count is not None:
            debug_log(f"tick {self.tick_count}: {ctx.selected_count} selected", stage="pipeline", level=2)
        return ctx

    def draw(self, highlight: bool = True) -> None:
        """Draw the outline and, optionally, highlights around selected objects.

        Drawing errors are reported on stderr instead of propagating into the
        host's ``on_draw``.
        """
        try:
            if highlight:
                draw_selection_highlights(self.selectables, self.config.highlight_color, self.config.highlight_padding)
            self.outline.draw()
        except Exception as exc:
            print(f"[Marquee] Draw error: {exc!r}", file=sys.stderr)


def run_ticks(pipeline: MarqueePipeline, batches: Iterable[Iterable[PointerEvent]], delta_time: float = 1 / 60) -> list[TickContext]:
    """Run one tick per event batch. Returns the tick contexts in order."""
    return [pipeline.tick(batch, delta_time) for batch in batches]
