"""Style identifiers used by the preview highlighter.

Three disjoint families exist:
- plain styles (keyword, number, ...), painted with one fixed colour,
- rainbow-eligible styles, whose instances get a colour keyed by their text,
- rainbow overlay styles, temporary entries carrying one palette colour.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List


class StyleKind(Enum):
    PLAIN = auto()
    RAINBOW_ELIGIBLE = auto()
    RAINBOW_OVERLAY = auto()


@dataclass(frozen=True)
class StyleId:
    name: str
    kind: StyleKind = StyleKind.PLAIN


KEYWORD = StyleId("keyword")
NUMBER = StyleId("number")
STRING = StyleId("string")
COMMENT = StyleId("comment")
OPERATOR = StyleId("operator")
IDENTIFIER = StyleId("identifier", StyleKind.RAINBOW_ELIGIBLE)

PLAIN_STYLES = [KEYWORD, NUMBER, STRING, COMMENT, OPERATOR]
RAINBOW_STYLES = [IDENTIFIER]

# Number of configurable stop colours; also the stop interval of the demo line.
RAINBOW_STOP_COUNT = 5

OVERLAY_PREFIX = "rainbow_temp_"


def is_rainbow_eligible(style: object) -> bool:
    return isinstance(style, StyleId) and style.kind is StyleKind.RAINBOW_ELIGIBLE


def is_rainbow_overlay(style: object) -> bool:
    return isinstance(style, StyleId) and style.kind is StyleKind.RAINBOW_OVERLAY


def overlay_style(index: int) -> StyleId:
    return StyleId(f"{OVERLAY_PREFIX}{index}", StyleKind.RAINBOW_OVERLAY)


def make_palette(count: int) -> List[StyleId]:
    """Return ``count`` overlay styles, one per colour slot."""
    if count < 0:
        raise ValueError(f"palette size must not be negative, got {count}")
    return [overlay_style(i) for i in range(count)]


__all__ = [
    "StyleKind",
    "StyleId",
    "KEYWORD",
    "NUMBER",
    "STRING",
    "COMMENT",
    "OPERATOR",
    "IDENTIFIER",
    "PLAIN_STYLES",
    "RAINBOW_STYLES",
    "RAINBOW_STOP_COUNT",
    "is_rainbow_eligible",
    "is_rainbow_overlay",
    "overlay_style",
    "make_palette",
]
