from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from map_viewer.model.view_models import Point, Rect, SceneBounds, ViewWindow, ZoomLimits

ZOOM_STEP = 1.2
ZOOM_IN = "in"
ZOOM_OUT = "out"


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def height_for_width(width: float, bounds: SceneBounds) -> float:
    """Window height that keeps the scene's aspect ratio."""
    if width == bounds.width:
        return bounds.height
    return width * bounds.aspect


def clamp_origin(
    x: float, y: float, w: float, h: float, bounds: SceneBounds
) -> Point:
    # a window as large as the scene has no pan room left
    max_x = max(0.0, bounds.width - w)
    max_y = max(0.0, bounds.height - h)
    return clamp(x, 0.0, max_x), clamp(y, 0.0, max_y)


def clamp_width(width: float, limits: ZoomLimits) -> float:
    return clamp(width, limits.min_width, limits.max_width)


def clamp_window(
    window: ViewWindow, bounds: SceneBounds, limits: ZoomLimits
) -> ViewWindow:
    """Return ``window`` adjusted so every viewport invariant holds."""
    w = clamp_width(window.w, limits)
    h = height_for_width(w, bounds)
    x, y = clamp_origin(window.x, window.y, w, h, bounds)
    return ViewWindow(x, y, w, h)


def initial_window(
    bounds: SceneBounds,
    limits: ZoomLimits,
    initial_zoom_factor: float,
    anchor: Point,
) -> ViewWindow:
    w = clamp_width(bounds.width / initial_zoom_factor, limits)
    h = height_for_width(w, bounds)
    x, y = clamp_origin(anchor[0], anchor[1], w, h, bounds)
    return ViewWindow(x, y, w, h)


def pan(
    current: ViewWindow, dx: float, dy: float, bounds: SceneBounds
) -> ViewWindow:
    """Translate the origin by scene-unit deltas, saturating at the edges."""
    x, y = clamp_origin(current.x + dx, current.y + dy, current.w, current.h, bounds)
    return replace(current, x=x, y=y)


def zoom_at_point(
    current: ViewWindow,
    scale: float,
    anchor_fx: float,
    anchor_fy: float,
    bounds: SceneBounds,
    limits: ZoomLimits,
) -> ViewWindow:
    """Rescale the window keeping the scene point under the anchor fixed.

    ``anchor_fx``/``anchor_fy`` are fractions of the current window's width
    and height. A ``scale`` above 1 widens the window (zoom out), below 1
    narrows it (zoom in).
    """
    fx = clamp(anchor_fx, 0.0, 1.0)
    fy = clamp(anchor_fy, 0.0, 1.0)
    new_w = clamp_width(current.w * scale, limits)
    new_h = height_for_width(new_w, bounds)
    x, y = clamp_origin(
        current.x + (current.w - new_w) * fx,
        current.y + (current.h - new_h) * fy,
        new_w,
        new_h,
        bounds,
    )
    return ViewWindow(x, y, new_w, new_h)


def zoom_at_center(
    current: ViewWindow, scale: float, bounds: SceneBounds, limits: ZoomLimits
) -> ViewWindow:
    return zoom_at_point(current, scale, 0.5, 0.5, bounds, limits)


def compute_zoom_scale(direction: str, step: float = ZOOM_STEP) -> float:
    if direction == ZOOM_OUT:
        return step
    if direction == ZOOM_IN:
        return 1 / step
    raise ValueError(f"Unknown zoom direction: {direction!r}")


def anchor_fraction(point: Point, screen_rect: Rect) -> Point:
    """Express an on-screen point as a fraction of the surface rectangle."""
    left, top, width, height = screen_rect
    fx = (point[0] - left) / width if width > 0 else 0.5
    fy = (point[1] - top) / height if height > 0 else 0.5
    return clamp(fx, 0.0, 1.0), clamp(fy, 0.0, 1.0)


def pixels_to_scene(
    dx_px: float,
    dy_px: float,
    window: ViewWindow,
    pixel_size: Tuple[float, float],
) -> Point:
    """Convert a screen-pixel delta into scene units at the current zoom."""
    pixel_w, pixel_h = pixel_size
    sx = window.w / pixel_w if pixel_w > 0 else 0.0
    sy = window.h / pixel_h if pixel_h > 0 else 0.0
    return dx_px * sx, dy_px * sy
