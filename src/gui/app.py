"""PySide6 colour settings window with a live rainbow preview."""

from __future__ import annotations

import logging
import sys

from PySide6 import QtCore, QtWidgets

from rainbow.page import PreviewPage, write_language_page

from .log import get_logger, setup_logger
from .preview import PreviewPanel
from .switcher import SwitcherPanel
from .theme import ThemeManager, ThemeMode


class SettingsWindow(QtWidgets.QMainWindow):
    def __init__(self, page: PreviewPage, theme: ThemeManager | None = None):
        super().__init__()
        self.setWindowTitle(f"Colors & Fonts: {page.name}")
        self.page = page
        self.theme = theme if theme is not None else ThemeManager()
        self.descriptors = page.descriptors()

        self.descriptor_list = QtWidgets.QListWidget()
        for descriptor in self.descriptors:
            item = QtWidgets.QListWidgetItem(descriptor.display_name)
            item.setData(QtCore.Qt.UserRole, descriptor)
            self.descriptor_list.addItem(item)
        self.descriptor_list.currentRowChanged.connect(self._on_descriptor_changed)

        self.preview = PreviewPanel()
        self.switcher = SwitcherPanel(self.theme, page, self.preview)
        self.switcher.add_listener(self._on_panel_changed)

        self.theme_box = QtWidgets.QComboBox()
        for mode in ThemeMode:
            self.theme_box.addItem(mode.value.title(), mode)
        self.theme_box.setCurrentIndex(list(ThemeMode).index(self.theme.current_mode))
        self.theme_box.currentIndexChanged.connect(self._on_theme_changed)

        top = QtWidgets.QHBoxLayout()
        top.addWidget(self.descriptor_list, 1)
        top.addWidget(self.switcher, 2)

        theme_bar = QtWidgets.QHBoxLayout()
        theme_bar.addWidget(QtWidgets.QLabel("Theme:"))
        theme_bar.addWidget(self.theme_box)
        theme_bar.addStretch(1)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.addLayout(theme_bar)
        layout.addLayout(top)
        layout.addWidget(self.preview, 2)
        self.setCentralWidget(central)
        self.resize(900, 640)

        if self.descriptors:
            self.descriptor_list.setCurrentRow(0)

    def current_descriptor(self):
        item = self.descriptor_list.currentItem()
        if item is None:
            return None
        return item.data(QtCore.Qt.UserRole)

    def _on_descriptor_changed(self, row: int):
        descriptor = self.current_descriptor()
        if descriptor is None:
            self.switcher.reset_default()
            return
        self.switcher.reset(descriptor)

    def _on_panel_changed(self):
        descriptor = self.current_descriptor()
        if descriptor is not None:
            self.switcher.apply(descriptor)

    def _on_theme_changed(self, index: int):
        self.theme.save_theme_mode(self.theme_box.itemData(index))
        descriptor = self.current_descriptor()
        if descriptor is not None:
            self.switcher.reset(descriptor)


def configure_logging(logs_dir=None) -> None:
    # Engine and session only log per-pass summaries at DEBUG.
    setup_logger("rainbow", logs_dir=logs_dir, level=logging.DEBUG)
    setup_logger("gui", logs_dir=logs_dir)


def main() -> int:
    configure_logging()
    log = get_logger("gui")
    app = QtWidgets.QApplication(sys.argv)
    window = SettingsWindow(write_language_page())
    window.show()
    log.info("settings window opened")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
