"""Tunable settings for marquee selection.

Values can be overridden from the environment:

- ``MARQUEE_OUTLINE_THICKNESS``: outline edge thickness (positive float)
- ``MARQUEE_BUTTON``: ``left``, ``right``, ``middle`` or ``any``
- ``MARQUEE_REPORT_INTERVAL``: seconds between selection reports (positive float)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

import arcade

from marquee.outline import DEFAULT_OUTLINE_COLOR

_BUTTONS: dict[str, int | None] = {
    "left": arcade.MOUSE_BUTTON_LEFT,
    "right": arcade.MOUSE_BUTTON_RIGHT,
    "middle": arcade.MOUSE_BUTTON_MIDDLE,
    "any": None,
}


@dataclass(frozen=True)
class MarqueeConfig:
    outline_thickness: float = 1.0
    outline_color: tuple[int, int, int, int] = DEFAULT_OUTLINE_COLOR
    highlight_color: arcade.Color = field(default=arcade.color.YELLOW)
    highlight_padding: float = 4.0
    button: int | None = None
    report_interval: float = 2.0

    def __post_init__(self) -> None:
        if self.outline_thickness <= 0:
            raise ValueError(f"outline_thickness must be positive, got {self.outline_thickness}")
        if self.report_interval <= 0:
            raise ValueError(f"report_interval must be positive, got {self.report_interval}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, base: MarqueeConfig | None = None) -> MarqueeConfig:
        """Return ``base`` (or the defaults) with environment overrides applied."""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        raw = env.get("MARQUEE_OUTLINE_THICKNESS")
        if raw:
            overrides["outline_thickness"] = _parse_float("MARQUEE_OUTLINE_THICKNESS", raw)

        raw = env.get("MARQUEE_REPORT_INTERVAL")
        if raw:
            overrides["report_interval"] = _parse_float("MARQUEE_REPORT_INTERVAL", raw)

        raw = env.get("MARQUEE_BUTTON")
        if raw:
            key = raw.strip().lower()
            if key not in _BUTTONS:
                raise ValueError(f"MARQUEE_BUTTON must be one of {', '.join(_BUTTONS)}, got {raw!r}")
            overrides["button"] = _BUTTONS[key]

        return replace(base or cls(), **overrides)


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
