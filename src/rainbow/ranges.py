"""Highlight ranges and the document text they point into."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Protocol

from .styles import StyleId


class InvalidRangeError(Exception):
    pass


@dataclass(frozen=True)
class HighlightRange:
    """Half-open ``[start, end)`` offset interval tagged with a style."""

    start: int
    end: int
    style: StyleId

    def shifted(self, delta: int) -> "HighlightRange":
        return replace(self, start=self.start + delta, end=self.end + delta)


class DocumentText(Protocol):
    def substring(self, start: int, end: int) -> str: ...


class TextDocument:
    """In-memory document over a plain string."""

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)

    def substring(self, start: int, end: int) -> str:
        if start < 0 or end < start or end > self.length:
            raise InvalidRangeError(
                f"range [{start}, {end}) is outside document of length {self.length}"
            )
        return self.text[start:end]


def shift_ranges(ranges: Iterable[HighlightRange], delta: int) -> List[HighlightRange]:
    return [r.shifted(delta) for r in ranges]


__all__ = [
    "InvalidRangeError",
    "HighlightRange",
    "DocumentText",
    "TextDocument",
    "shift_ranges",
]
