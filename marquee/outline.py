"""Live outline of the rectangle being dragged.

The outline is four thin edges. Their geometry is recomputed every tick from
the drag state; :class:`OutlineRenderer` keeps exactly four edge records while
a drag is active and none otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import arcade

from marquee.debug import debug_log
from marquee.geometry import Viewport, normalize_box
from marquee.state import Dragging, DragState

STAGE = "outline"

DEFAULT_OUTLINE_COLOR = (51, 204, 51, 255)


class EdgeKind(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class OutlineEdge:
    """One outline edge in world space, centred on ``position``."""

    kind: EdgeKind
    position: tuple[float, float, float]
    size: tuple[float, float]

    @property
    def center_x(self) -> float:
        return self.position[0]

    @property
    def center_y(self) -> float:
        return self.position[1]

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]


def compute_outline_edges(
    drag: DragState, viewport: Viewport, thickness: float = 1.0
) -> dict[EdgeKind, tuple[tuple[float, float, float], tuple[float, float]]]:
    """Return position and size of every edge for ``drag``, keyed by kind.

    An idle drag has no edges. Sizes are never negative whatever the drag
    direction.
    """
    if not isinstance(drag, Dragging):
        return {}

    box = normalize_box(drag.anchor, drag.current).to_world(viewport)
    mid_x = box.left + box.width / 2
    mid_y = box.bottom + box.height / 2

    return {
        EdgeKind.TOP: ((mid_x, box.top, 0.0), (box.width, thickness)),
        EdgeKind.BOTTOM: ((mid_x, box.bottom, 0.0), (box.width, thickness)),
        EdgeKind.LEFT: ((box.left, mid_y, 0.0), (thickness, box.height)),
        EdgeKind.RIGHT: ((box.right, mid_y, 0.0), (thickness, box.height)),
    }


def _draw_centered_rectangle_filled(
    center_x: float,
    center_y: float,
    width: float,
    height: float,
    color: arcade.Color,
) -> None:
    left = center_x - width / 2
    bottom = center_y - height / 2
    arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, color)


class OutlineRenderer:
    """Owns the outline edges of the active drag."""

    def __init__(self, thickness: float = 1.0, color: tuple[int, int, int, int] = DEFAULT_OUTLINE_COLOR):
        self.thickness = thickness
        self.color = color
        self._edges: dict[EdgeKind, OutlineEdge] = {}

    @property
    def edges(self) -> list[OutlineEdge]:
        return list(self._edges.values())

    def __len__(self) -> int:
        return len(self._edges)

    def get_edge(self, kind: EdgeKind) -> OutlineEdge | None:
        return self._edges.get(kind)

    def sync(self, drag: DragState, viewport: Viewport | None) -> None:
        """Bring the edges in line with ``drag``.

        Edges are created on the first tick of a drag and updated in place
        afterwards. An idle drag removes them. Without a viewport the edges
        are left as they are until the next tick.
        """
        if not isinstance(drag, Dragging):
            self.clear()
            return

        if viewport is None:
            debug_log("no viewport; outline update skipped", stage=STAGE, level=1)
            return

        geometry = compute_outline_edges(drag, viewport, self.thickness)
        if not self._edges:
            debug_log("creating outline edges", stage=STAGE, level=2)
        for kind, (position, size) in geometry.items():
            edge = self._edges.get(kind)
            if edge is None:
                self._edges[kind] = OutlineEdge(kind, position, size)
            else:
                edge.position = position
                edge.size = size

    def clear(self) -> None:
        """Remove every edge. Safe to call when there are none."""
        if self._edges:
            debug_log("removing outline edges", stage=STAGE, level=2)
            self._edges.clear()

    def draw(self) -> None:
        """Draw the edges. Call with a camera that maps world space onto the window."""
        for edge in self._edges.values():
            _draw_centered_rectangle_filled(edge.center_x, edge.center_y, edge.width, edge.height, self.color)
