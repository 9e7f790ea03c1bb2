from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class SceneBounds:
    """Full extent of the scene in scene units."""

    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.height / self.width


@dataclass(frozen=True)
class ZoomLimits:
    """Allowed window widths: ``min_width`` is closest, ``max_width`` farthest."""

    min_width: float
    max_width: float


@dataclass(frozen=True)
class ViewWindow:
    x: float
    y: float
    w: float
    h: float

    def as_tuple(self) -> Rect:
        return (self.x, self.y, self.w, self.h)

    def center(self) -> Point:
        return (self.x + self.w / 2, self.y + self.h / 2)
