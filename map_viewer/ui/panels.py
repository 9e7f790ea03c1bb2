"""Show/hide toggles for the auxiliary panels around the map."""
from __future__ import annotations

from typing import NamedTuple

from PyQt5 import QtCore, QtWidgets


class ToggleLabels(NamedTuple):
    hidden: str
    shown: str


SIDE_PANEL_LABELS = ToggleLabels(hidden="◄ Some more data", shown="► No more data")
LEGEND_LABELS = ToggleLabels(hidden="▲ Some more data", shown="▼ No more data")


def toggle_label(hidden: bool, labels: ToggleLabels) -> str:
    return labels.hidden if hidden else labels.shown


class ToggleButton(QtWidgets.QPushButton):
    """Button that hides or shows ``target`` and describes the next action."""

    visibilityToggled = QtCore.pyqtSignal(bool)

    def __init__(
        self,
        target: QtWidgets.QWidget,
        labels: ToggleLabels,
        parent: QtWidgets.QWidget | None = None,
        *,
        hidden: bool = False,
    ) -> None:
        super().__init__(parent)
        self._target = target
        self._labels = labels
        self._hidden = hidden
        if hidden:
            self._target.hide()
        self.setText(toggle_label(self._hidden, labels))
        self.clicked.connect(self.toggle_target)

    @property
    def target_hidden(self) -> bool:
        return self._hidden

    def toggle_target(self) -> bool:
        """Flip the target's visibility, returning True when it is now hidden."""
        self._hidden = not self._hidden
        self._target.setHidden(self._hidden)
        self.setText(toggle_label(self._hidden, self._labels))
        self.visibilityToggled.emit(self._hidden)
        return self._hidden
