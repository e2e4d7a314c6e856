"""Palette preview line: one labelled token per colour slot."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .ranges import HighlightRange
from .styles import StyleId


def build_demo_line(
    palette: Sequence[StyleId], stop_interval: int
) -> Tuple[str, List[HighlightRange]]:
    """Return ``("Stop#1 T T Stop#2 ...", ranges)`` for the given palette.

    Every ``stop_interval``-th slot is labelled with its stop number, the
    rest with ``T``. Range ``i`` bounds token ``i`` and carries ``palette[i]``.
    """
    if stop_interval <= 0:
        raise ValueError(f"stop interval must be positive, got {stop_interval}")

    tokens: List[str] = []
    ranges: List[HighlightRange] = []
    pos = 0
    for i, style in enumerate(palette):
        token = f"Stop#{i // stop_interval + 1}" if i % stop_interval == 0 else "T"
        end = pos + len(token)
        ranges.append(HighlightRange(pos, end, style))
        tokens.append(token)
        pos = end + 1
    return " ".join(tokens), ranges


__all__ = ["build_demo_line"]
