"""
Marquee - drag-rectangle selection for Arcade scenes.

Components, run once per tick in this order by MarqueePipeline:
- Pointer aggregation: press/move/release events into a drag state
- Outline: four live edges tracing the rectangle being dragged
- Selection: sets ``selected`` on every object inside the released rectangle
"""

from .aggregator import aggregate_pointer_events, finalize_drag
from .config import MarqueeConfig
from .debug import (
    apply_env_debug_level,
    clear_observed_stages,
    debug_log,
    get_debug_options,
    observe_stages,
    set_debug_options,
)
from .events import ButtonEvent, ButtonState, PointerEvent, PointerEventQueue, PointerMoved
from .geometry import BoundingBox, Point, Viewport, normalize_box, screen_to_world, viewport_from_window
from .outline import EdgeKind, OutlineEdge, OutlineRenderer, compute_outline_edges
from .pipeline import CORE_STAGES, MarqueePipeline, TickContext, run_ticks
from .report import SelectionReporter
from .selection import (
    Selectable,
    SelectableSprite,
    apply_selection,
    draw_selection_highlights,
    is_inside,
    require_collection,
    selected_objects,
)
from .state import IDLE, Dragging, DragState, Idle, PointerState

apply_env_debug_level()

__all__ = [
    # Pipeline
    "MarqueePipeline",
    "TickContext",
    "CORE_STAGES",
    "run_ticks",
    # Events
    "ButtonEvent",
    "ButtonState",
    "PointerEvent",
    "PointerMoved",
    "PointerEventQueue",
    # State
    "PointerState",
    "DragState",
    "Idle",
    "Dragging",
    "IDLE",
    # Geometry
    "BoundingBox",
    "Point",
    "Viewport",
    "normalize_box",
    "screen_to_world",
    "viewport_from_window",
    # Stages
    "aggregate_pointer_events",
    "finalize_drag",
    "EdgeKind",
    "OutlineEdge",
    "OutlineRenderer",
    "compute_outline_edges",
    "Selectable",
    "SelectableSprite",
    "apply_selection",
    "is_inside",
    "require_collection",
    "selected_objects",
    "draw_selection_highlights",
    "SelectionReporter",
    # Configuration
    "MarqueeConfig",
    "set_debug_options",
    "get_debug_options",
    "observe_stages",
    "clear_observed_stages",
    "debug_log",
    "apply_env_debug_level",
]
