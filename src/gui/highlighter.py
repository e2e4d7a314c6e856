"""Paints a highlight sequence onto the preview document."""

from __future__ import annotations

from typing import Iterable, Sequence

from PySide6 import QtGui

from rainbow.ranges import HighlightRange
from rainbow.styles import KEYWORD, PLAIN_STYLES, RAINBOW_STYLES, StyleId


def build_formats(
    syntax_colors: dict[str, str],
    palette: Sequence[StyleId],
    rainbow_colors: Sequence[str],
) -> dict[StyleId, QtGui.QTextCharFormat]:
    """Map every known style to a character format."""
    formats = {}
    for style in [*PLAIN_STYLES, *RAINBOW_STYLES]:
        color = syntax_colors.get(style.name)
        if color is None:
            continue
        fmt = QtGui.QTextCharFormat()
        fmt.setForeground(QtGui.QColor(color))
        if style == KEYWORD:
            fmt.setFontWeight(QtGui.QFont.Bold)
        formats[style] = fmt

    if rainbow_colors:
        for i, style in enumerate(palette):
            fmt = QtGui.QTextCharFormat()
            fmt.setForeground(QtGui.QColor(rainbow_colors[i % len(rainbow_colors)]))
            formats[style] = fmt
    return formats


class PreviewHighlighter(QtGui.QSyntaxHighlighter):
    """Layers formats in sequence order: later ranges merge over earlier ones."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.ranges: tuple[HighlightRange, ...] = ()
        self.formats: dict[StyleId, QtGui.QTextCharFormat] = {}

    def set_ranges(self, ranges: Iterable[HighlightRange]) -> None:
        self.ranges = tuple(ranges)

    def set_formats(self, formats: dict[StyleId, QtGui.QTextCharFormat]) -> None:
        self.formats = dict(formats)

    def highlightBlock(self, text: str):
        block_start = self.currentBlock().position()
        block_end = block_start + len(text)
        for r in self.ranges:
            fmt = self.formats.get(r.style)
            if fmt is None:
                continue
            start = max(r.start, block_start)
            end = min(r.end, block_end)
            for pos in range(start - block_start, end - block_start):
                layered = self.format(pos)
                layered.merge(fmt)
                self.setFormat(pos, 1, layered)
