"""Gesture handling for the map viewport.

Input events arrive already reduced to plain numbers (pointer id and screen
coordinates, wheel delta), so the handlers here run without any GUI toolkit.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from map_viewer.config import ViewerConfig
from map_viewer.geometry import view_transform
from map_viewer.model.view_models import Point, ViewWindow
from map_viewer.model.view_state import ViewState
from map_viewer.surface import RenderSurface

logger = logging.getLogger(__name__)


@dataclass
class DragState:
    dragging: bool = False
    pointer_id: int | None = None
    last_pointer_pos: Point | None = None

    def clear(self) -> None:
        self.dragging = False
        self.pointer_id = None
        self.last_pointer_pos = None


class GestureAdapter:
    """Turns pointer, wheel and button input into view window updates."""

    def __init__(
        self,
        state: ViewState,
        surface: RenderSurface,
        config: ViewerConfig,
    ) -> None:
        self._state = state
        self._surface = surface
        self._config = config
        self._drag = DragState()

    @property
    def dragging(self) -> bool:
        return self._drag.dragging

    @property
    def view_state(self) -> ViewState:
        return self._state

    def _commit(self, window: ViewWindow) -> None:
        self._state.commit(window)
        self._surface.set_view_rect(self._state.get())

    # ------------------------------------------------------------------
    # Pointer drag
    # ------------------------------------------------------------------
    def handle_pointer_down(self, pointer_id: int, x: float, y: float) -> bool:
        if self._drag.dragging:
            return False
        self._surface.capture_pointer(pointer_id)
        self._drag.dragging = True
        self._drag.pointer_id = pointer_id
        self._drag.last_pointer_pos = (x, y)
        logger.debug("Drag started by pointer %s at (%s, %s)", pointer_id, x, y)
        return True

    def handle_pointer_move(self, pointer_id: int, x: float, y: float) -> bool:
        if not self._drag.dragging or pointer_id != self._drag.pointer_id:
            return False
        last_x, last_y = self._drag.last_pointer_pos or (x, y)
        current = self._state.get()
        # scale depends on the current zoom and surface size, so never cache it
        dx, dy = view_transform.pixels_to_scene(
            x - last_x, y - last_y, current, self._surface.pixel_size()
        )
        # content follows the pointer, so the window origin moves the other way
        self._commit(view_transform.pan(current, -dx, -dy, self._state.bounds))
        self._drag.last_pointer_pos = (x, y)
        return True

    def handle_pointer_up(self, pointer_id: int, x: float, y: float) -> bool:
        _ = (x, y)
        if not self._drag.dragging or pointer_id != self._drag.pointer_id:
            return False
        self._end_drag()
        return True

    def handle_pointer_cancel(self, pointer_id: int) -> bool:
        if not self._drag.dragging or pointer_id != self._drag.pointer_id:
            return False
        self._end_drag()
        return True

    def handle_capture_lost(self) -> bool:
        if not self._drag.dragging:
            return False
        self._end_drag()
        return True

    def _end_drag(self) -> None:
        pointer_id = self._drag.pointer_id
        if pointer_id is not None:
            self._surface.release_pointer(pointer_id)
        self._drag.clear()
        logger.debug("Drag ended for pointer %s", pointer_id)

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------
    def handle_wheel(self, delta_y: float, x: float, y: float) -> bool:
        """Zoom around the cursor; negative ``delta_y`` zooms in.

        Always consumes the event so the surface never scrolls natively; a
        zero delta (horizontal-only wheel) leaves the view unchanged.
        """
        if delta_y == 0:
            return True
        direction = view_transform.ZOOM_IN if delta_y < 0 else view_transform.ZOOM_OUT
        scale = view_transform.compute_zoom_scale(direction, self._config.zoom_step)
        fx, fy = view_transform.anchor_fraction((x, y), self._surface.screen_rect())
        self._commit(
            view_transform.zoom_at_point(
                self._state.get(),
                scale,
                fx,
                fy,
                self._state.bounds,
                self._state.limits,
            )
        )
        return True

    def zoom(self, direction: str) -> ViewWindow:
        scale = view_transform.compute_zoom_scale(direction, self._config.zoom_step)
        self._commit(
            view_transform.zoom_at_center(
                self._state.get(), scale, self._state.bounds, self._state.limits
            )
        )
        return self._state.get()

    def zoom_in(self) -> ViewWindow:
        return self.zoom(view_transform.ZOOM_IN)

    def zoom_out(self) -> ViewWindow:
        return self.zoom(view_transform.ZOOM_OUT)

    def reset(self) -> ViewWindow:
        window = self._state.reset(self._config.initial_zoom, self._config.anchor)
        self._surface.set_view_rect(window)
        return window
