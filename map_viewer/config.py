"""Configuration helpers for the map viewport."""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass, replace
import logging
import math
from pathlib import Path
import sys
from typing import Optional

from map_viewer.geometry.view_transform import ZOOM_STEP as DEFAULT_ZOOM_STEP
from map_viewer.model.view_models import Point, SceneBounds, ZoomLimits

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "map_viewer.ini"
_SECTION = "viewport"

DEFAULT_SCENE_WIDTH = 2976.18
DEFAULT_SCENE_HEIGHT = 1503.34
DEFAULT_MIN_WIDTH = 500.0
DEFAULT_INITIAL_ZOOM = 1.5
DEFAULT_ANCHOR = (500.0, 120.0)


class ConfigError(ValueError):
    """Raised when viewport settings break the bounds/limits invariants."""


@dataclass(frozen=True)
class ViewerConfig:
    scene_width: float = DEFAULT_SCENE_WIDTH
    scene_height: float = DEFAULT_SCENE_HEIGHT
    min_width: float = DEFAULT_MIN_WIDTH
    max_width: float = DEFAULT_SCENE_WIDTH
    zoom_step: float = DEFAULT_ZOOM_STEP
    initial_zoom: float = DEFAULT_INITIAL_ZOOM
    anchor: Point = DEFAULT_ANCHOR

    def scene_bounds(self) -> SceneBounds:
        return SceneBounds(self.scene_width, self.scene_height)

    def zoom_limits(self) -> ZoomLimits:
        return ZoomLimits(self.min_width, self.max_width)

    def validate(self) -> "ViewerConfig":
        values = {
            "scene_width": self.scene_width,
            "scene_height": self.scene_height,
            "min_width": self.min_width,
            "max_width": self.max_width,
            "zoom_step": self.zoom_step,
            "initial_zoom": self.initial_zoom,
            "anchor_x": self.anchor[0],
            "anchor_y": self.anchor[1],
        }
        for name, value in values.items():
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be a finite number, got {value}")
        if self.scene_width <= 0 or self.scene_height <= 0:
            raise ConfigError(
                f"Scene dimensions must be positive, got "
                f"{self.scene_width} x {self.scene_height}"
            )
        if not 0 < self.min_width <= self.max_width <= self.scene_width:
            raise ConfigError(
                "Zoom widths must satisfy 0 < min_width <= max_width <= "
                f"scene_width, got {self.min_width}, {self.max_width}, "
                f"{self.scene_width}"
            )
        if self.zoom_step <= 1:
            raise ConfigError(f"Zoom step must be greater than 1, got {self.zoom_step}")
        if self.initial_zoom <= 0:
            raise ConfigError(
                f"Initial zoom must be positive, got {self.initial_zoom}"
            )
        return self


def config_dir(main_script_path: Optional[Path]) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if main_script_path is not None:
        return main_script_path.resolve().parent
    main_module = sys.modules.get("__main__")
    if main_module and getattr(main_module, "__file__", None):
        return Path(main_module.__file__).resolve().parent
    return Path.cwd()


def config_path(main_script_path: Optional[Path]) -> Path:
    return config_dir(main_script_path) / CONFIG_FILENAME


def _read_float(parser: ConfigParser, key: str, fallback: float) -> float:
    try:
        return parser.getfloat(_SECTION, key, fallback=fallback)
    except ValueError:
        logger.info("Ignoring invalid %s value in [%s]", key, _SECTION)
        return fallback


def load_config(ini_path: Path) -> ViewerConfig:
    """Read viewport settings from ``ini_path``, falling back to defaults."""
    defaults = ViewerConfig()
    if not ini_path.exists():
        return defaults
    parser = ConfigParser()
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error):
        logger.info("Could not read %s, using default viewport settings", ini_path)
        return defaults
    if not parser.has_section(_SECTION):
        return defaults

    scene_width = _read_float(parser, "scene_width", defaults.scene_width)
    return replace(
        defaults,
        scene_width=scene_width,
        scene_height=_read_float(parser, "scene_height", defaults.scene_height),
        min_width=_read_float(parser, "min_width", defaults.min_width),
        max_width=_read_float(parser, "max_width", scene_width),
        zoom_step=_read_float(parser, "zoom_step", defaults.zoom_step),
        initial_zoom=_read_float(parser, "initial_zoom", defaults.initial_zoom),
        anchor=(
            _read_float(parser, "anchor_x", defaults.anchor[0]),
            _read_float(parser, "anchor_y", defaults.anchor[1]),
        ),
    )


def load_viewer_config(
    main_script_path: Optional[Path], override_path: Optional[Path] = None
) -> ViewerConfig:
    ini_path = override_path or config_path(main_script_path)
    return load_config(ini_path).validate()
