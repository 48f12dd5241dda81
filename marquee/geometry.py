"""Screen and world geometry for marquee selection.

Screen space is the window's pixel space as reported by Arcade mouse events
(origin bottom-left, y up). World space is centred on the window: the window
centre maps to (0, 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple


class Point(NamedTuple):
    x: float
    y: float


class Viewport(NamedTuple):
    width: float
    height: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle with ``top >= bottom`` and ``right >= left``."""

    top: float
    bottom: float
    left: float
    right: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def to_world(self, viewport: Viewport) -> BoundingBox:
        """Return this screen-space box shifted into centred world space."""
        half_w = viewport.width / 2
        half_h = viewport.height / 2
        return BoundingBox(
            top=self.top - half_h,
            bottom=self.bottom - half_h,
            left=self.left - half_w,
            right=self.right - half_w,
        )

    def contains(self, x: float, y: float) -> bool:
        """Exclusive point test: points on an edge are outside."""
        return self.left < x < self.right and self.bottom < y < self.top


def normalize_box(a: tuple[float, float], b: tuple[float, float]) -> BoundingBox:
    """Build a box from two opposite corners, independent of drag direction."""
    ax, ay = a
    bx, by = b
    return BoundingBox(top=max(ay, by), bottom=min(ay, by), left=min(ax, bx), right=max(ax, bx))


def screen_to_world(point: tuple[float, float], viewport: Viewport) -> Point:
    x, y = point
    return Point(x - viewport.width / 2, y - viewport.height / 2)


def viewport_from_window(window: Any = None) -> Viewport | None:
    """Return the current window extents, or None if no usable window exists.

    Args:
        window: Window to query. When omitted the active Arcade window is used.
    """
    if window is None:
        import arcade

        try:
            window = arcade.get_window()
        except RuntimeError:
            return None
        if window is None:
            return None

    try:
        width, height = window.width, window.height
    except AttributeError:
        return None
    if width is None or height is None or width <= 0 or height <= 0:
        return None
    return Viewport(width, height)
