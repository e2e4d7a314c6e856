"""Read-only editor showing the highlighted demo text."""

from __future__ import annotations

from typing import Sequence

from PySide6 import QtGui, QtWidgets

from rainbow.ranges import HighlightRange
from rainbow.session import PreviewState

from .highlighter import PreviewHighlighter


class PreviewPanel(QtWidgets.QPlainTextEdit):
    """Preview editor driven by a published ``PreviewState``."""

    def __init__(self, parent=None):
        """Initialize preview panel."""
        super().__init__(parent)
        self.setReadOnly(True)
        self.setLineWrapMode(QtWidgets.QPlainTextEdit.NoWrap)
        self.setFont(QtGui.QFont("Consolas", 13))
        self.highlighter = PreviewHighlighter(self.document())
        self.state = PreviewState()

    def set_colors(self, background: str, foreground: str) -> None:
        """Set the editor background and default text colour."""
        palette = self.palette()
        palette.setColor(QtGui.QPalette.Base, QtGui.QColor(background))
        palette.setColor(QtGui.QPalette.Text, QtGui.QColor(foreground))
        self.setPalette(palette)
        self.viewport().setPalette(palette)

    def set_formats(self, formats: dict) -> None:
        """Replace the style formats used by the highlighter."""
        self.highlighter.set_formats(formats)

    def show_state(self, state: PreviewState) -> None:
        """Publish a new preview state and repaint."""
        self.state = state
        if self.toPlainText() != state.text:
            self.setPlainText(state.text)
        self.update_view()
        if state.scroll_to is not None:
            self.scroll_highlight_in_view(state.scroll_to)

    def update_view(self) -> None:
        """Re-run highlighting with the current ranges."""
        self.highlighter.set_ranges(self.state.ranges)
        self.highlighter.rehighlight()

    def scroll_highlight_in_view(self, ranges: Sequence[HighlightRange]) -> None:
        """Scroll so the first range (or the top of the text) is visible."""
        cursor = self.textCursor()
        cursor.setPosition(ranges[0].start if ranges else 0)
        self.setTextCursor(cursor)
        self.ensureCursorVisible()
