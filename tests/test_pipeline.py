"""Tests for the ordered marquee pipeline."""

import pytest

from marquee import (
    CORE_STAGES,
    BoundingBox,
    MarqueeConfig,
    MarqueePipeline,
    Point,
    SelectableSprite,
    Viewport,
    run_ticks,
)
from tests.conftest import VIEWPORT, move_to, press_at, release_at


def _names(units):
    return [unit.name for unit in units if unit.selected]


class TestDragScenario:
    """End-to-end drag from screen (100, 100) to (300, 250) in an 800x600 window."""

    def test_selects_unit_inside_box(self, pipeline, units):
        """Test press, move and release in separate ticks."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(move_to(300, 250))
        pipeline.tick(release_at(300, 250))

        assert _names(units) == ["inside"]

    def test_single_tick_drag(self, pipeline, units):
        """Test a whole drag delivered in one tick."""
        pipeline.tick(press_at(100, 100) + move_to(300, 250) + release_at(300, 250))

        assert _names(units) == ["inside"]

    def test_reverse_drag_selects_same(self, pipeline, units):
        """Test that dragging backwards selects the same units."""
        pipeline.tick(press_at(300, 250))
        pipeline.tick(release_at(100, 100))

        assert _names(units) == ["inside"]

    def test_box_applied_in_release_tick(self, pipeline):
        """Test that the box is applied and consumed in the release tick."""
        pipeline.tick(press_at(100, 100))
        ctx = pipeline.tick(release_at(300, 250))

        assert ctx.selected_count == 1
        assert pipeline.pointer.finalized_box is None


class TestOneShotBox:
    """Test suite for one-shot box consumption."""

    def test_next_tick_sees_no_box(self, pipeline):
        """Test that only one selection pass sees a finalized box."""
        pipeline.tick(press_at(100, 100))
        first = pipeline.tick(release_at(300, 250))
        second = pipeline.tick()

        assert first.selected_count == 1
        assert second.selected_count is None


class TestStickySelection:
    """Test that selections survive ticks without a new box."""

    def test_pointer_movement_keeps_selection(self, pipeline, units):
        """Test that moving without a button keeps the selection."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))

        for x in range(0, 800, 100):
            pipeline.tick(move_to(x, 500))

        assert _names(units) == ["inside"]

    def test_new_drag_keeps_selection_until_release(self, pipeline, units):
        """Test that a new drag replaces the selection only on release."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))

        pipeline.tick(press_at(500, 400))
        pipeline.tick(move_to(700, 500))
        assert _names(units) == ["inside"]

        pipeline.tick(release_at(700, 500))
        assert _names(units) == ["far"]

    def test_zero_area_drag_clears_selection(self, pipeline, units):
        """Test that a click without movement selects nothing."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))

        pipeline.tick(press_at(400, 300))
        pipeline.tick(release_at(400, 300))

        assert _names(units) == []


class TestOutlineLifecycle:
    """Test that the outline has 0 or 4 edges at every tick boundary."""

    def test_press_creates_four_edges(self, pipeline):
        """Test that a press produces four edges in the same tick."""
        pipeline.tick(press_at(100, 100))

        assert len(pipeline.outline) == 4

    def test_release_removes_edges_in_same_tick(self, pipeline):
        """Test that a release removes the edges in the same tick."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))

        assert len(pipeline.outline) == 0

    def test_edge_count_never_partial(self, pipeline):
        """Test edge counts at each tick of a mixed event sequence."""
        batches = [
            move_to(50, 50),
            press_at(100, 100),
            move_to(150, 120),
            move_to(300, 250),
            release_at(300, 250),
            move_to(10, 10),
            press_at(20, 20),
            press_at(30, 30),
            release_at(40, 40),
            release_at(40, 40),
        ]

        counts = []
        for batch in batches:
            pipeline.tick(batch)
            counts.append(len(pipeline.outline))

        assert counts == [0, 4, 4, 4, 0, 0, 4, 4, 0, 0]

    def test_edges_follow_pointer(self, pipeline):
        """Test that edges track the pointer while dragging."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(move_to(300, 250))

        top = next(edge for edge in pipeline.outline.edges if edge.kind.value == "top")
        assert top.position == (-200.0, -50.0, 0.0)
        assert top.size == (200.0, 1.0)


class TestMissingViewport:
    """Test ticks where no viewport is available."""

    def test_selection_retried_when_viewport_returns(self, units):
        """Test that a box released without a viewport applies on a later tick."""
        viewports = iter([VIEWPORT, None, VIEWPORT])
        pipeline = MarqueePipeline(units, viewport_provider=lambda: next(viewports))

        pipeline.tick(press_at(100, 100))
        missed = pipeline.tick(release_at(300, 250))
        assert missed.selected_count is None
        assert pipeline.pointer.finalized_box == BoundingBox(top=250, bottom=100, left=100, right=300)

        retried = pipeline.tick()
        assert retried.selected_count == 1
        assert _names(units) == ["inside"]

    def test_no_window_does_not_raise(self, units, mocker):
        """Test ticking with no active Arcade window."""
        mocker.patch("arcade.get_window", side_effect=RuntimeError("No window is active"))
        pipeline = MarqueePipeline(units)

        ctx = pipeline.tick(press_at(100, 100) + release_at(300, 250))

        assert ctx.viewport is None
        assert len(pipeline.outline) == 0
        assert not any(unit.selected for unit in units)


class TestStageOrder:
    """Test suite for stage ordering."""

    def test_core_stage_order(self, pipeline):
        """Test aggregator, outline, selection stage order."""
        names = [stage.__name__ for stage in pipeline.stages]

        assert names == ["aggregate_stage", "outline_stage", "selection_stage"]
        assert pipeline.stages == CORE_STAGES

    def test_extra_stage_runs_after_core(self, pipeline):
        """Test that added stages see the state written by the core stages."""
        seen = []

        def spy(ctx):
            seen.append((ctx.pointer.position, ctx.pointer.finalized_box, ctx.selected_count))

        pipeline.add_stage(spy)
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))

        assert seen == [(Point(100, 100), None, None), (Point(300, 250), None, 1)]

    def test_tick_context_carries_inputs(self, pipeline):
        """Test that the tick context exposes events, delta time and viewport."""
        ctx = pipeline.tick(move_to(1, 2), delta_time=0.5)

        assert ctx.events == tuple(move_to(1, 2))
        assert ctx.delta_time == 0.5
        assert ctx.viewport == Viewport(800, 600)

    def test_tick_count(self, pipeline):
        """Test that every tick increments the tick counter."""
        run_ticks(pipeline, [[], [], []])

        assert pipeline.tick_count == 3


class TestButtonConfig:
    """Test suite for the button filter."""

    def test_only_configured_button_drags(self, units):
        """Test that a configured button filters drags end to end."""
        import arcade

        config = MarqueeConfig(button=arcade.MOUSE_BUTTON_LEFT)
        pipeline = MarqueePipeline(units, config, viewport_provider=lambda: VIEWPORT)

        pipeline.tick(press_at(100, 100, button=arcade.MOUSE_BUTTON_RIGHT))
        assert len(pipeline.outline) == 0

        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))
        assert _names(units) == ["inside"]


class TestPipelineDraw:
    """Test suite for MarqueePipeline.draw."""

    def test_draws_highlights_and_outline(self, pipeline, units, mocker):
        """Test that draw() outlines selected units and fills the four edges."""
        mock_fill = mocker.patch("arcade.draw_lbwh_rectangle_filled")
        mock_outline = mocker.patch("arcade.draw_lbwh_rectangle_outline")
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))
        pipeline.tick(press_at(500, 400))

        pipeline.draw()

        assert mock_outline.call_count == 1
        assert mock_fill.call_count == 4

    def test_highlight_can_be_skipped(self, pipeline, units, mocker):
        """Test that highlight=False draws only the outline."""
        mock_outline = mocker.patch("arcade.draw_lbwh_rectangle_outline")
        units[0].selected = True

        pipeline.draw(highlight=False)

        mock_outline.assert_not_called()

    def test_draw_error_reported_on_stderr(self, pipeline, mocker, capsys):
        """Test that a failing draw call is reported instead of raised."""
        mocker.patch("arcade.draw_lbwh_rectangle_filled", side_effect=RuntimeError("no context"))
        pipeline.tick(press_at(100, 100))

        pipeline.draw()

        assert "[Marquee] Draw error: RuntimeError('no context')" in capsys.readouterr().err


class TestSelectablesContainer:
    """Test that selectables must survive repeated iteration."""

    def test_generator_rejected(self, units):
        """Test that a one-shot generator is refused up front."""
        with pytest.raises(TypeError, match="MarqueePipeline"):
            MarqueePipeline((unit for unit in units), viewport_provider=lambda: VIEWPORT)

    def test_second_box_applies_to_same_list(self, pipeline, units):
        """Test that every release re-scans the full collection."""
        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))
        pipeline.tick(press_at(500, 400))
        pipeline.tick(release_at(700, 500))

        assert _names(units) == ["far"]

    def test_objects_added_later_are_considered(self, pipeline, units):
        """Test that the pipeline reads the live collection on each tick."""
        late = SelectableSprite(10, 10, -200, -150, name="late")
        units.append(late)

        pipeline.tick(press_at(100, 100))
        pipeline.tick(release_at(300, 250))

        assert _names(units) == ["inside", "late"]
