"""Shared test fixtures and utilities for the marquee test suite."""

import arcade
import pytest

from marquee import (
    ButtonEvent,
    ButtonState,
    MarqueePipeline,
    PointerMoved,
    SelectableSprite,
    Viewport,
    set_debug_options,
)

VIEWPORT = Viewport(800, 600)


def press_at(x, y, button=arcade.MOUSE_BUTTON_LEFT):
    """Events an Arcade window produces for a press at (x, y)."""
    return [PointerMoved(x, y), ButtonEvent(ButtonState.PRESSED, button)]


def release_at(x, y, button=arcade.MOUSE_BUTTON_LEFT):
    return [PointerMoved(x, y), ButtonEvent(ButtonState.RELEASED, button)]


def move_to(x, y):
    return [PointerMoved(x, y)]


@pytest.fixture(autouse=True)
def reset_debug_options():
    """Keep debug output off between tests."""
    set_debug_options(level=0, include_all=False, include=None)
    yield
    set_debug_options(level=0, include_all=False, include=None)


@pytest.fixture
def viewport() -> Viewport:
    return VIEWPORT


@pytest.fixture
def units() -> list[SelectableSprite]:
    """Three units in centred world space."""
    return [
        SelectableSprite(20, 20, -150, -100, arcade.color.RED, name="inside"),
        SelectableSprite(20, 20, 0, 0, arcade.color.GREEN, name="origin"),
        SelectableSprite(20, 20, 200, 150, arcade.color.BLUE, name="far"),
    ]


@pytest.fixture
def pipeline(units) -> MarqueePipeline:
    """Pipeline over ``units`` with a fixed 800x600 viewport."""
    return MarqueePipeline(units, viewport_provider=lambda: VIEWPORT)


class MarqueeTestBase:
    """Base class for tests that change debug options."""

    def teardown_method(self):
        """Clean up after each test."""
        set_debug_options(level=0, include_all=False, include=None)
