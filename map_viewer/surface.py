from __future__ import annotations

from typing import Protocol, runtime_checkable

from map_viewer.model.view_models import Rect, ViewWindow


@runtime_checkable
class RenderSurface(Protocol):
    def set_view_rect(self, window: ViewWindow) -> None:
        ...

    def pixel_size(self) -> tuple[float, float]:
        ...

    def screen_rect(self) -> Rect:
        ...

    def capture_pointer(self, pointer_id: int) -> None:
        ...

    def release_pointer(self, pointer_id: int) -> None:
        ...
