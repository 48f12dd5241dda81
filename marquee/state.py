"""Drag state shared by the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field

from marquee.geometry import BoundingBox, Point


@dataclass(frozen=True)
class Idle:
    """No button is held."""


@dataclass(frozen=True)
class Dragging:
    """A button is held; ``anchor`` is where it went down."""

    anchor: Point
    current: Point


DragState = Idle | Dragging

IDLE = Idle()


@dataclass
class PointerState:
    """Pointer context threaded through every tick.

    ``position`` and ``drag`` are written by the pointer aggregator only.
    ``finalized_box`` is set on release (in screen space) and cleared by the
    selection stage once it has been applied.
    """

    position: Point = Point(0.0, 0.0)
    drag: DragState = field(default=IDLE)
    finalized_box: BoundingBox | None = None

    @property
    def anchor(self) -> Point | None:
        if isinstance(self.drag, Dragging):
            return self.drag.anchor
        return None

    @property
    def is_dragging(self) -> bool:
        return isinstance(self.drag, Dragging)
