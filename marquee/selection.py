"""Marquee hit testing and the per-object ``selected`` flag.

:func:`apply_selection` is the only code that writes ``selected``.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator
from typing import Protocol, runtime_checkable

import arcade

from marquee.debug import debug_log
from marquee.geometry import BoundingBox, Viewport
from marquee.state import PointerState

STAGE = "selection"


@runtime_checkable
class Selectable(Protocol):
    """Anything with a world-space centre and a ``selected`` flag."""

    center_x: float
    center_y: float
    selected: bool


class SelectableSprite(arcade.SpriteSolidColor):
    """Solid-colour sprite that can be marquee-selected.

    Args:
        width: Sprite width in pixels
        height: Sprite height in pixels
        center_x: World-space X position
        center_y: World-space Y position
        color: Fill colour
        name: Label used in selection reports
    """

    def __init__(
        self,
        width: int,
        height: int,
        center_x: float = 0,
        center_y: float = 0,
        color: arcade.Color = arcade.color.WHITE,
        *,
        name: str = "",
        **kwargs,
    ):
        super().__init__(width, height, center_x, center_y, color=color, **kwargs)
        self.name = name
        self.selected = False

    def __repr__(self) -> str:
        return f"SelectableSprite(name={self.name!r}, center=({self.center_x}, {self.center_y}), selected={self.selected})"


def is_inside(box: BoundingBox, x: float, y: float) -> bool:
    """Return True if (x, y) lies strictly inside ``box``; edges count as outside."""
    return box.contains(x, y)


def require_collection(objects: Collection[Selectable], owner: str) -> Collection[Selectable]:
    """Reject one-shot iterators, which would be exhausted after the first tick."""
    if isinstance(objects, Iterator):
        raise TypeError(f"{owner} needs a re-iterable collection such as a list or SpriteList, got {type(objects).__name__}")
    return objects


def apply_selection(state: PointerState, objects: Iterable[Selectable], viewport: Viewport | None) -> int | None:
    """Apply a finalized box to every object, then consume the box.

    Each object's ``selected`` flag becomes whether its centre lies strictly
    inside the box. With no finalized box nothing changes, so earlier
    selections persist. Without a viewport the box is kept for the next tick.

    Returns:
        Number of selected objects, or None if no box was applied.
    """
    screen_box = state.finalized_box
    if screen_box is None:
        return None

    if viewport is None:
        debug_log("no viewport; selection deferred to next tick", stage=STAGE, level=1)
        return None

    box = screen_box.to_world(viewport)
    count = 0
    for obj in objects:
        obj.selected = is_inside(box, obj.center_x, obj.center_y)
        if obj.selected:
            count += 1

    state.finalized_box = None
    debug_log(f"applied {box} -> {count} selected", stage=STAGE, level=2)
    return count


def selected_objects(objects: Iterable[Selectable]) -> list[Selectable]:
    return [obj for obj in objects if obj.selected]


def _draw_centered_rectangle_outline(
    center_x: float,
    center_y: float,
    width: float,
    height: float,
    color: arcade.Color,
    border_width: float = 1,
) -> None:
    left = center_x - width / 2
    bottom = center_y - height / 2
    arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, color, border_width)


def draw_selection_highlights(
    objects: Iterable[Selectable],
    color: arcade.Color = arcade.color.YELLOW,
    padding: float = 4.0,
    border_width: float = 2,
) -> None:
    """Outline every selected object. Objects without a size get a padding-sized square."""
    for obj in objects:
        if not obj.selected:
            continue
        width = getattr(obj, "width", 0) + padding
        height = getattr(obj, "height", 0) + padding
        _draw_centered_rectangle_outline(obj.center_x, obj.center_y, width, height, color, border_width)
