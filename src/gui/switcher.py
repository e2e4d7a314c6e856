"""Switches between the colour panel and the rainbow panel and keeps the preview in sync."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6 import QtCore, QtGui, QtWidgets

from rainbow.descriptors import Descriptor, PanelKind
from rainbow.page import PreviewPage
from rainbow.session import SwitcherState, reset, reset_default, update_preview
from rainbow.styles import RAINBOW_STOP_COUNT, make_palette

from .highlighter import build_formats
from .preview import PreviewPanel
from .theme import ThemeManager

log = logging.getLogger(__name__)


def _swatch_style(color: str) -> str:
    return f"background: {color}; border: 1px solid #808080; min-width: 48px;"


class ColorAndFontDescriptionPanel(QtWidgets.QWidget):
    """Foreground colour editor for one plain style."""

    changed = QtCore.Signal()

    def __init__(self, theme: ThemeManager, parent=None):
        """Initialize colour panel."""
        super().__init__(parent)
        self.theme = theme
        self._pending_color: str | None = None
        self._style_name = ""

        layout = QtWidgets.QFormLayout(self)
        self.name_label = QtWidgets.QLabel()
        self.color_button = QtWidgets.QPushButton()
        self.color_button.clicked.connect(self._choose_color)
        layout.addRow("Attribute:", self.name_label)
        layout.addRow("Foreground:", self.color_button)

    def reset(self, descriptor: Descriptor) -> None:
        """Show the colour currently configured for the descriptor's style."""
        self._pending_color = None
        self._style_name = descriptor.style.name
        self.name_label.setText(descriptor.display_name)
        color = self.theme.get_syntax_colors().get(self._style_name, "#000000")
        self.color_button.setStyleSheet(_swatch_style(color))

    def apply(self, descriptor: Descriptor) -> None:
        """Persist the chosen colour, if any."""
        if self._pending_color is not None:
            self.theme.set_syntax_color(descriptor.style.name, self._pending_color)
            self._pending_color = None

    def set_color(self, color: str) -> None:
        """Stage a new foreground colour and notify listeners."""
        self._pending_color = color
        self.color_button.setStyleSheet(_swatch_style(color))
        self.changed.emit()

    def _choose_color(self) -> None:
        current = self.theme.get_syntax_colors().get(self._style_name, "#000000")
        color = QtWidgets.QColorDialog.getColor(QtGui.QColor(current), self)
        if color.isValid():
            self.set_color(color.name())


class RainbowDescriptionPanel(QtWidgets.QWidget):
    """Rainbow switch and stop colours."""

    changed = QtCore.Signal()

    def __init__(self, theme: ThemeManager, parent=None):
        """Initialize rainbow panel."""
        super().__init__(parent)
        self.theme = theme
        self._pending_stops: dict[int, str] = {}

        layout = QtWidgets.QVBoxLayout(self)
        self.rainbow_checkbox = QtWidgets.QCheckBox("Rainbow identifiers")
        self.rainbow_checkbox.toggled.connect(lambda _checked: self.changed.emit())
        layout.addWidget(self.rainbow_checkbox)

        stops_layout = QtWidgets.QHBoxLayout()
        self.stop_buttons = []
        for i in range(RAINBOW_STOP_COUNT):
            button = QtWidgets.QPushButton()
            button.setToolTip(f"Stop #{i + 1}")
            button.clicked.connect(lambda _checked=False, idx=i: self._choose_stop(idx))
            stops_layout.addWidget(button)
            self.stop_buttons.append(button)
        stops_layout.addStretch(1)
        layout.addLayout(stops_layout)
        layout.addStretch(1)

    def reset(self, descriptor: Descriptor) -> None:
        """Show the persisted rainbow configuration."""
        self._pending_stops.clear()
        self.rainbow_checkbox.blockSignals(True)
        self.rainbow_checkbox.setChecked(self.theme.is_rainbow_on())
        self.rainbow_checkbox.blockSignals(False)
        for button, color in zip(self.stop_buttons, self.theme.get_stop_colors()):
            button.setStyleSheet(_swatch_style(color))

    def apply(self, descriptor: Descriptor) -> None:
        """Persist the switch and any staged stop colours."""
        self.theme.set_rainbow_on(self.rainbow_checkbox.isChecked())
        for index, color in self._pending_stops.items():
            self.theme.set_stop_color(index, color)
        self._pending_stops.clear()

    def set_stop_color(self, index: int, color: str) -> None:
        """Stage a new stop colour and notify listeners."""
        self._pending_stops[index] = color
        self.stop_buttons[index].setStyleSheet(_swatch_style(color))
        self.changed.emit()

    def _choose_stop(self, index: int) -> None:
        current = self.theme.get_stop_colors()[index]
        color = QtWidgets.QColorDialog.getColor(QtGui.QColor(current), self)
        if color.isValid():
            self.set_stop_color(index, color.name())


class SwitcherPanel(QtWidgets.QWidget):
    """Hosts whichever description panel fits the selected descriptor."""

    def __init__(
        self,
        theme: ThemeManager,
        page: PreviewPage,
        preview: PreviewPanel | None = None,
        parent=None,
    ):
        """Initialize switcher panel."""
        super().__init__(parent)
        self.theme = theme
        self.page = page
        self.preview = preview
        self.state = SwitcherState()

        self.color_panel = ColorAndFontDescriptionPanel(theme)
        self.rainbow_panel = RainbowDescriptionPanel(theme)
        self._panels = {
            PanelKind.COLOR_AND_FONT: self.color_panel,
            PanelKind.RAINBOW: self.rainbow_panel,
        }

        self._layout = QtWidgets.QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

        size = QtCore.QSize()
        for panel in self._panels.values():
            size = size.expandedTo(panel.sizeHint())
        self.setMinimumSize(size)

    def active_panel(self) -> QtWidgets.QWidget | None:
        """Return the description panel currently shown, if any."""
        if self.state.active is None:
            return None
        return self._panels[self.state.active]

    def reset_default(self) -> None:
        """Remove the active panel."""
        old_panel = self.active_panel()
        self.state = reset_default(self.state)
        if old_panel is not None:
            self._swap(old_panel, None)

    def reset(self, descriptor: Descriptor) -> None:
        """Show the panel for ``descriptor`` and refresh the preview."""
        old_panel = self.active_panel()
        self.state = reset(self.state, descriptor)
        new_panel = self.active_panel()
        if old_panel is not new_panel:
            self._swap(old_panel, new_panel)
        new_panel.reset(descriptor)
        self.update_preview_panel(descriptor)

    def apply(self, descriptor: Descriptor) -> None:
        """Persist the active panel's edits and refresh the preview."""
        panel = self.active_panel()
        if panel is None:
            return
        panel.apply(descriptor)
        self.update_preview_panel(descriptor)

    def add_listener(self, listener: Callable[[], None]) -> None:
        """Call ``listener`` whenever either panel changes."""
        self.color_panel.changed.connect(listener)
        self.rainbow_panel.changed.connect(listener)

    def update_preview_panel(self, descriptor: Descriptor) -> None:
        """Recompute preview text and ranges, then publish them."""
        if self.preview is None:
            return
        rainbow_colors = self.theme.get_rainbow_colors()
        palette = make_palette(len(rainbow_colors))
        state = update_preview(
            self.page,
            descriptor,
            self.state,
            self.preview.state,
            self.theme.is_rainbow_on(),
            palette,
            RAINBOW_STOP_COUNT,
        )
        syntax_colors = self.theme.get_syntax_colors()
        self.preview.set_colors(
            self.theme.get_editor_background(), syntax_colors["identifier"]
        )
        self.preview.set_formats(build_formats(syntax_colors, palette, rainbow_colors))
        self.preview.show_state(state)
        log.debug("preview published for %s", descriptor.display_name)

    def _swap(
        self, old_panel: QtWidgets.QWidget | None, new_panel: QtWidgets.QWidget | None
    ) -> None:
        # Suspend painting so the switch shows up as one repaint.
        self.setUpdatesEnabled(False)
        try:
            if old_panel is not None:
                self._layout.removeWidget(old_panel)
                old_panel.setParent(None)
            if new_panel is not None:
                self._layout.addWidget(new_panel)
                new_panel.show()
        finally:
            self.setUpdatesEnabled(True)
