"""Pointer aggregation and drag finalization.

The aggregator is the only writer of ``PointerState.position`` and
``PointerState.drag``. Release handling doubles as the drag finalizer: it turns
the anchor and the release position into a normalized screen-space box that the
selection stage consumes exactly once.
"""

from __future__ import annotations

from collections.abc import Iterable

from marquee.debug import debug_log
from marquee.events import ButtonEvent, ButtonState, PointerEvent, PointerMoved
from marquee.geometry import BoundingBox, Point, normalize_box
from marquee.state import IDLE, Dragging, PointerState

STAGE = "aggregator"


def aggregate_pointer_events(state: PointerState, events: Iterable[PointerEvent], *, button: int | None = None) -> None:
    """Fold one tick's events into ``state`` in emission order.

    Args:
        state: Pointer context to mutate.
        events: Events since the previous tick.
        button: Only button events for this button drive the drag. None accepts any button.
    """
    for event in events:
        if isinstance(event, PointerMoved):
            _move(state, event)
        elif isinstance(event, ButtonEvent):
            if button is not None and event.button is not None and event.button != button:
                debug_log(f"ignoring {event.state.value} of button {event.button}", stage=STAGE, level=3)
                continue
            if event.state is ButtonState.PRESSED:
                _press(state)
            else:
                finalize_drag(state)


def _move(state: PointerState, event: PointerMoved) -> None:
    state.position = Point(event.x, event.y)
    if isinstance(state.drag, Dragging):
        state.drag = Dragging(anchor=state.drag.anchor, current=state.position)


def _press(state: PointerState) -> None:
    state.finalized_box = None
    if isinstance(state.drag, Dragging):
        debug_log(f"press while dragging from {tuple(state.drag.anchor)}; restarting drag", stage=STAGE, level=1)
    else:
        debug_log(f"drag started at {tuple(state.position)}", stage=STAGE, level=1)
    state.drag = Dragging(anchor=state.position, current=state.position)


def finalize_drag(state: PointerState) -> BoundingBox | None:
    """End the active drag and store its normalized box on ``state``.

    A release without an active drag is ignored.

    Returns:
        The finalized screen-space box, or None if there was no drag.
    """
    if not isinstance(state.drag, Dragging):
        debug_log("release without an active drag ignored", stage=STAGE, level=1)
        return None

    anchor = state.drag.anchor
    released_at = state.position
    box = normalize_box(anchor, released_at)
    debug_log(f"made a box from {tuple(anchor)} to {tuple(released_at)}", stage=STAGE, level=1)
    state.finalized_box = box
    state.drag = IDLE
    return box
