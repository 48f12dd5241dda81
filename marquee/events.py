"""Pointer events and the queue that collects them between ticks.

Arcade delivers mouse input through ``on_mouse_*`` callbacks at arbitrary
points between frames. :class:`PointerEventQueue` records them in emission
order so the pipeline can consume one batch per tick.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from marquee.debug import debug_log


class ButtonState(Enum):
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class ButtonEvent:
    state: ButtonState
    button: int | None = None


@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


PointerEvent = ButtonEvent | PointerMoved


class PointerEventQueue:
    """Collect pointer events until the next tick drains them.

    Press and release callbacks carry a position in Arcade, so a
    :class:`PointerMoved` is recorded right before the button event. The
    aggregator then captures the anchor exactly where the button went down.
    """

    def __init__(self) -> None:
        self._events: list[PointerEvent] = []
        self._window: Any | None = None
        self._original_handlers: dict[str, Callable[..., Any] | None] = {}

    def __len__(self) -> int:
        return len(self._events)

    def push(self, event: PointerEvent) -> None:
        debug_log(f"queued {event}", stage="events", level=3)
        self._events.append(event)

    def drain(self) -> list[PointerEvent]:
        """Return every queued event in emission order and empty the queue."""
        events, self._events = self._events, []
        return events

    # Arcade-compatible handlers

    def on_mouse_motion(self, x: float, y: float, dx: float = 0, dy: float = 0) -> None:
        self.push(PointerMoved(x, y))

    def on_mouse_drag(self, x: float, y: float, dx: float = 0, dy: float = 0, buttons: int = 0, modifiers: int = 0) -> None:
        self.push(PointerMoved(x, y))

    def on_mouse_press(self, x: float, y: float, button: int | None = None, modifiers: int = 0) -> None:
        self.push(PointerMoved(x, y))
        self.push(ButtonEvent(ButtonState.PRESSED, button))

    def on_mouse_release(self, x: float, y: float, button: int | None = None, modifiers: int = 0) -> None:
        self.push(PointerMoved(x, y))
        self.push(ButtonEvent(ButtonState.RELEASED, button))

    # Window wrapping

    _HANDLER_NAMES = ("on_mouse_motion", "on_mouse_drag", "on_mouse_press", "on_mouse_release")

    def attach_to_window(self, window: Any) -> None:
        """Wrap the window's mouse handlers so every event is also queued.

        The window's own handlers still run after the event is recorded.
        """
        if self._window is window:
            return
        if self._window is not None:
            self.detach()

        self._window = window
        for name in self._HANDLER_NAMES:
            original = getattr(window, name, None)
            self._original_handlers[name] = original
            setattr(window, name, self._wrap(getattr(self, name), original))

    def detach(self) -> None:
        """Restore the handlers replaced by :meth:`attach_to_window`."""
        if self._window is None:
            return
        for name, original in self._original_handlers.items():
            if original is not None:
                setattr(self._window, name, original)
            else:
                vars(self._window).pop(name, None)
        self._original_handlers.clear()
        self._window = None

    @staticmethod
    def _wrap(record: Callable[..., None], original: Callable[..., Any] | None) -> Callable[..., Any]:
        def wrapped(*args: Any, **kwargs: Any) -> Any:
            record(*args, **kwargs)
            if original is not None:
                return original(*args, **kwargs)
            return None

        return wrapped
