from __future__ import annotations

import pytest

from map_viewer.config import ViewerConfig
from map_viewer.interaction import GestureAdapter
from map_viewer.model.view_models import ViewWindow
from map_viewer.model.view_state import ViewState
from map_viewer.surface import RenderSurface


class _FakeSurface:
    def __init__(self) -> None:
        self.pixels = (250.0, 125.0)
        self.rect = (100.0, 50.0, 250.0, 125.0)
        self.rendered: list[ViewWindow] = []
        self.captured: list[int] = []
        self.released: list[int] = []

    def set_view_rect(self, window: ViewWindow) -> None:
        self.rendered.append(window)

    def pixel_size(self) -> tuple[float, float]:
        return self.pixels

    def screen_rect(self) -> tuple[float, float, float, float]:
        return self.rect

    def capture_pointer(self, pointer_id: int) -> None:
        self.captured.append(pointer_id)

    def release_pointer(self, pointer_id: int) -> None:
        self.released.append(pointer_id)


@pytest.fixture
def config() -> ViewerConfig:
    return ViewerConfig(
        scene_width=1000.0,
        scene_height=500.0,
        min_width=100.0,
        max_width=1000.0,
        zoom_step=1.2,
        initial_zoom=2.0,
        anchor=(100.0, 50.0),
    )


@pytest.fixture
def surface() -> _FakeSurface:
    return _FakeSurface()


@pytest.fixture
def adapter(config, surface) -> GestureAdapter:
    state = ViewState(config.scene_bounds(), config.zoom_limits())
    gestures = GestureAdapter(state, surface, config)
    gestures.reset()
    return gestures


def test_fake_surface_satisfies_protocol(surface) -> None:
    assert isinstance(surface, RenderSurface)


def test_reset_pushes_initial_window(adapter, surface) -> None:
    assert surface.rendered == [ViewWindow(100.0, 50.0, 500.0, 250.0)]


def test_drag_pans_against_pointer_motion(adapter, surface) -> None:
    assert adapter.handle_pointer_down(7, 10.0, 10.0)
    assert adapter.dragging
    assert surface.captured == [7]

    assert adapter.handle_pointer_move(7, 20.0, 15.0)

    window = adapter.view_state.get()
    assert (window.x, window.y) == (80.0, 40.0)
    assert surface.rendered[-1] == window


def test_drag_deltas_are_incremental(adapter) -> None:
    adapter.handle_pointer_down(1, 0.0, 0.0)
    adapter.handle_pointer_move(1, -5.0, 0.0)
    adapter.handle_pointer_move(1, -10.0, 0.0)

    assert adapter.view_state.get().x == 120.0


def test_drag_scale_follows_current_zoom(adapter) -> None:
    zoomed = adapter.zoom_in()
    start_x = zoomed.x

    adapter.handle_pointer_down(1, 0.0, 0.0)
    adapter.handle_pointer_move(1, -10.0, 0.0)

    assert adapter.view_state.get().x == pytest.approx(start_x + 10.0 * zoomed.w / 250.0)


def test_drag_scale_follows_surface_size(adapter, surface) -> None:
    adapter.handle_pointer_down(1, 0.0, 0.0)
    surface.pixels = (500.0, 250.0)
    adapter.handle_pointer_move(1, -10.0, 0.0)

    assert adapter.view_state.get().x == 110.0


def test_drag_saturates_at_scene_edge(adapter) -> None:
    adapter.handle_pointer_down(1, 0.0, 0.0)
    adapter.handle_pointer_move(1, 1000.0, 1000.0)

    assert adapter.view_state.get().x == 0.0
    assert adapter.view_state.get().y == 0.0

    adapter.handle_pointer_move(1, 1200.0, 1000.0)
    assert adapter.view_state.get().x == 0.0

    adapter.handle_pointer_move(1, 1190.0, 1000.0)
    assert adapter.view_state.get().x == 20.0


def test_pointer_up_ends_drag(adapter, surface) -> None:
    adapter.handle_pointer_down(3, 0.0, 0.0)

    assert adapter.handle_pointer_up(3, 0.0, 0.0)
    assert not adapter.dragging
    assert surface.released == [3]

    before = adapter.view_state.get()
    assert not adapter.handle_pointer_move(3, 50.0, 50.0)
    assert adapter.view_state.get() == before


def test_pointer_cancel_and_capture_loss_end_drag(adapter, surface) -> None:
    adapter.handle_pointer_down(3, 0.0, 0.0)
    assert adapter.handle_pointer_cancel(3)
    assert not adapter.dragging

    adapter.handle_pointer_down(4, 0.0, 0.0)
    assert adapter.handle_capture_lost()
    assert not adapter.dragging
    assert surface.released == [3, 4]


def test_events_while_idle_are_ignored(adapter, surface) -> None:
    rendered = len(surface.rendered)

    assert not adapter.handle_pointer_move(1, 10.0, 10.0)
    assert not adapter.handle_pointer_up(1, 10.0, 10.0)
    assert not adapter.handle_pointer_cancel(1)
    assert not adapter.handle_capture_lost()

    assert len(surface.rendered) == rendered
    assert surface.released == []


def test_other_pointers_are_ignored_while_dragging(adapter, surface) -> None:
    adapter.handle_pointer_down(1, 0.0, 0.0)

    assert not adapter.handle_pointer_down(2, 0.0, 0.0)
    assert not adapter.handle_pointer_move(2, 40.0, 40.0)
    assert not adapter.handle_pointer_up(2, 40.0, 40.0)
    assert adapter.dragging
    assert surface.captured == [1]
    assert adapter.view_state.get().x == 100.0


def test_wheel_zooms_in_around_cursor(adapter, surface) -> None:
    before = adapter.view_state.get()
    cursor = (100.0 + 250.0 * 0.25, 50.0 + 125.0 * 0.75)

    assert adapter.handle_wheel(-120.0, *cursor)

    after = adapter.view_state.get()
    assert after.w == pytest.approx(before.w / 1.2)
    assert after.h == pytest.approx(before.h / 1.2)
    assert after.x + after.w * 0.25 == pytest.approx(before.x + before.w * 0.25)
    assert after.y + after.h * 0.75 == pytest.approx(before.y + before.h * 0.75)
    assert surface.rendered[-1] == after


def test_wheel_down_zooms_out(adapter) -> None:
    before = adapter.view_state.get()

    assert adapter.handle_wheel(120.0, 225.0, 112.5)

    assert adapter.view_state.get().w == pytest.approx(before.w * 1.2)


def test_wheel_without_delta_is_consumed_without_zooming(adapter, surface) -> None:
    before = adapter.view_state.get()
    rendered = len(surface.rendered)

    assert adapter.handle_wheel(0.0, 225.0, 112.5)
    assert adapter.view_state.get() == before
    assert len(surface.rendered) == rendered


def test_wheel_works_during_drag(adapter) -> None:
    adapter.handle_pointer_down(1, 0.0, 0.0)

    assert adapter.handle_wheel(-1.0, 225.0, 112.5)
    assert adapter.dragging


def test_zoom_buttons_keep_center(adapter) -> None:
    center = adapter.view_state.get().center()

    zoomed_in = adapter.zoom_in()
    assert zoomed_in.w == pytest.approx(500.0 / 1.2)
    assert zoomed_in.center() == pytest.approx(center)

    zoomed_out = adapter.zoom_out()
    assert zoomed_out.w == pytest.approx(500.0)
    assert zoomed_out.center() == pytest.approx(center)


def test_reset_restores_start_view(adapter) -> None:
    adapter.zoom_in()
    adapter.handle_pointer_down(1, 0.0, 0.0)
    adapter.handle_pointer_move(1, 30.0, 30.0)
    adapter.handle_pointer_up(1, 30.0, 30.0)

    assert adapter.reset() == ViewWindow(100.0, 50.0, 500.0, 250.0)
