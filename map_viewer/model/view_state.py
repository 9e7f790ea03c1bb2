"""View-state container for the map viewport.

This module sits in the model layer as the single owner of the visible
window over the scene. It does not render, read input or persist anything;
it stores the current window and the immutable bounds it is clamped against.
"""
from __future__ import annotations

import logging

from map_viewer.geometry import view_transform
from map_viewer.model.view_models import Point, SceneBounds, ViewWindow, ZoomLimits

logger = logging.getLogger(__name__)


class ViewState:
    """Owns the current view window.

    The window is a frozen value, so snapshots handed to the render surface
    can never be mutated behind the state's back. All changes come in through
    :meth:`reset` or :meth:`commit`.
    """

    def __init__(self, bounds: SceneBounds, limits: ZoomLimits) -> None:
        self._bounds = bounds
        self._limits = limits
        self._window = view_transform.clamp_window(
            ViewWindow(0.0, 0.0, limits.max_width, limits.max_width * bounds.aspect),
            bounds,
            limits,
        )

    @property
    def bounds(self) -> SceneBounds:
        return self._bounds

    @property
    def limits(self) -> ZoomLimits:
        return self._limits

    def get(self) -> ViewWindow:
        return self._window

    def reset(self, initial_zoom_factor: float, anchor: Point) -> ViewWindow:
        """Restore the start-up zoom with the origin pinned at ``anchor``."""
        self._window = view_transform.initial_window(
            self._bounds, self._limits, initial_zoom_factor, anchor
        )
        logger.debug(
            "View reset to zoom %.3f at %s: %s",
            initial_zoom_factor,
            anchor,
            self._window,
        )
        return self._window

    def commit(self, window: ViewWindow) -> bool:
        """Replace the current window, returning True on change."""
        if window == self._window:
            return False
        self._window = window
        return True
