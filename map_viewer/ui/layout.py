from __future__ import annotations

from dataclasses import dataclass

BOTTOM_MARGIN = 20
PANEL_VERTICAL_PADDING = 120


@dataclass(frozen=True)
class BottomLayout:
    bottom_offset: float
    panel_max_height: float


def bottom_offsets(
    surface_bottom: float, viewport_height: float, surface_height: float
) -> BottomLayout:
    """Place the bottom chrome against the rendered surface's lower edge.

    ``bottom_offset`` is the distance from the viewport's bottom edge to the
    bottom of the controls and legend. The side panel may not grow taller
    than the surface minus its padding and toggle button.
    """
    distance_from_bottom = viewport_height - surface_bottom
    return BottomLayout(
        bottom_offset=distance_from_bottom + BOTTOM_MARGIN,
        panel_max_height=max(0.0, surface_height - PANEL_VERTICAL_PADDING),
    )
