from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from PyQt5 import QtCore, QtGui, QtWidgets

from map_viewer.config import ViewerConfig
from map_viewer.interaction import GestureAdapter
from map_viewer.model.view_state import ViewState
from map_viewer.ui.layout import bottom_offsets
from map_viewer.ui.map_widget import MapWidget
from map_viewer.ui.panels import LEGEND_LABELS, SIDE_PANEL_LABELS, ToggleButton

logger = logging.getLogger(__name__)

CHROME_LEFT_MARGIN = 20


class MapViewerApp(QtWidgets.QApplication):
    """Thin application wrapper for the map viewer."""

    def __init__(self, argv: List[str]):
        super().__init__(argv)
        self.setQuitOnLastWindowClosed(True)
        self.window: MapViewerWindow | None = None


class MapViewerWindow(QtWidgets.QMainWindow):
    """Single-window viewer with zoom controls and two collapsible panels."""

    def __init__(
        self,
        config: ViewerConfig | None = None,
        svg_path: Path | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Map Viewer")

        self._config = config or ViewerConfig()
        self._map = MapWidget(svg_path)
        self._view_state = ViewState(
            self._config.scene_bounds(), self._config.zoom_limits()
        )
        self._gestures = GestureAdapter(self._view_state, self._map, self._config)
        self._map.set_gesture_adapter(self._gestures)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self.side_panel = QtWidgets.QFrame()
        self.side_panel.setFrameShape(QtWidgets.QFrame.StyledPanel)
        self.side_panel.setLayout(QtWidgets.QVBoxLayout())
        self._side_toggle = ToggleButton(self.side_panel, SIDE_PANEL_LABELS)

        side_column = QtWidgets.QVBoxLayout()
        side_column.addWidget(self._side_toggle)
        side_column.addWidget(self.side_panel, 1)

        content = QtWidgets.QHBoxLayout(central)
        content.addWidget(self._map, 1)
        content.addLayout(side_column)

        self._controls = QtWidgets.QWidget(central)
        self._zoom_in_button = QtWidgets.QPushButton("+")
        self._zoom_in_button.setToolTip("Zoom in")
        self._zoom_out_button = QtWidgets.QPushButton("−")
        self._zoom_out_button.setToolTip("Zoom out")
        self._reset_button = QtWidgets.QPushButton("Reset")
        controls_layout = QtWidgets.QHBoxLayout(self._controls)
        controls_layout.setContentsMargins(0, 0, 0, 0)
        controls_layout.addWidget(self._zoom_in_button)
        controls_layout.addWidget(self._zoom_out_button)
        controls_layout.addWidget(self._reset_button)

        self._legend_container = QtWidgets.QWidget(central)
        self.legend_panel = QtWidgets.QFrame()
        self.legend_panel.setFrameShape(QtWidgets.QFrame.StyledPanel)
        self.legend_panel.setLayout(QtWidgets.QHBoxLayout())
        self._legend_toggle = ToggleButton(self.legend_panel, LEGEND_LABELS)
        legend_layout = QtWidgets.QVBoxLayout(self._legend_container)
        legend_layout.setContentsMargins(0, 0, 0, 0)
        legend_layout.addWidget(self._legend_toggle)
        legend_layout.addWidget(self.legend_panel)

        self._zoom_in_button.clicked.connect(self._gestures.zoom_in)
        self._zoom_out_button.clicked.connect(self._gestures.zoom_out)
        self._reset_button.clicked.connect(self._gestures.reset)
        self._legend_toggle.visibilityToggled.connect(self._position_bottom_elements)
        self._map.geometryChangedOnScreen.connect(self._position_bottom_elements)

        self._gestures.reset()
        self.resize(1280, 720)

    @property
    def gestures(self) -> GestureAdapter:
        return self._gestures

    @property
    def map_widget(self) -> MapWidget:
        return self._map

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # noqa: D401
        super().resizeEvent(event)
        self._position_bottom_elements()

    def showEvent(self, event: QtGui.QShowEvent) -> None:  # noqa: D401
        super().showEvent(event)
        QtCore.QTimer.singleShot(0, self._position_bottom_elements)

    def _position_bottom_elements(self) -> None:
        central = self.centralWidget()
        if central is None:
            return
        surface = self._map.geometry()
        layout = bottom_offsets(
            surface_bottom=surface.y() + surface.height(),
            viewport_height=central.height(),
            surface_height=surface.height(),
        )

        for chrome in (self._controls, self._legend_container):
            chrome.adjustSize()
        bottom = central.height() - int(layout.bottom_offset)
        self._controls.move(
            surface.x() + CHROME_LEFT_MARGIN, bottom - self._controls.height()
        )
        self._legend_container.move(
            surface.x() + (surface.width() - self._legend_container.width()) // 2,
            bottom - self._legend_container.height(),
        )
        self._controls.raise_()
        self._legend_container.raise_()
        self.side_panel.setMaximumHeight(int(layout.panel_max_height))
