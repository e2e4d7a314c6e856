"""Splicing rainbow overlay ranges into a highlight sequence.

Each rainbow-eligible range gets an overlay range with the same bounds and
the palette style of its identifier's colour slot. Overlay entries left over
from an earlier pass are dropped before new ones are derived, so feeding the
output back in gives the same result.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .ranges import DocumentText, HighlightRange
from .slots import AssignmentTable, ColorSlotAssigner, SlotUsage, rainbow_hash
from .styles import StyleId, is_rainbow_eligible, is_rainbow_overlay

log = logging.getLogger(__name__)


class OverlayEmissionPolicy(Enum):
    # Overlay painted beneath and above the base style. A layered renderer
    # merges formats in order, so without the trailing copy the base style's
    # foreground would cover the rainbow colour.
    DUPLICATE_BEFORE_AND_AFTER = "duplicate_before_and_after"
    SINGLE_AFTER = "single_after"

    def emit(
        self, overlay: HighlightRange, original: HighlightRange
    ) -> Tuple[HighlightRange, ...]:
        if self is OverlayEmissionPolicy.DUPLICATE_BEFORE_AND_AFTER:
            return (overlay, original, overlay)
        return (original, overlay)


class OverlayMerger:
    def __init__(
        self,
        palette: Sequence[StyleId],
        is_eligible: Callable[[object], bool] = is_rainbow_eligible,
        policy: OverlayEmissionPolicy = OverlayEmissionPolicy.DUPLICATE_BEFORE_AND_AFTER,
        assigner: Optional[ColorSlotAssigner] = None,
    ):
        self.palette = list(palette)
        self.is_eligible = is_eligible
        self.policy = policy
        if assigner is None and self.palette:
            assigner = ColorSlotAssigner(len(self.palette))
        self.assigner = assigner

    def apply(
        self,
        doc: DocumentText,
        header_ranges: Optional[Sequence[HighlightRange]],
        ranges: Sequence[HighlightRange],
    ) -> Sequence[HighlightRange]:
        if not self.palette:
            return ranges

        result: List[HighlightRange] = []
        if header_ranges is not None:
            result.extend(header_ranges)

        table: AssignmentTable = {}
        usage: SlotUsage = SlotUsage()
        emitted = 0
        purged = 0
        for r in ranges:
            if self.is_eligible(r.style):
                identifier = doc.substring(r.start, r.end)
                slot = self.assigner.slot_for(
                    table, identifier, rainbow_hash(identifier), usage
                )
                overlay = HighlightRange(r.start, r.end, self.palette[slot])
                result.extend(self.policy.emit(overlay, r))
                emitted += 1
            elif is_rainbow_overlay(r.style):
                purged += 1
            else:
                result.append(r)

        log.debug(
            "rainbow overlay: %d eligible ranges, %d identifiers, %d stale entries dropped",
            emitted,
            len(table),
            purged,
        )
        return result

    def remove(self, ranges: Sequence[HighlightRange]) -> Sequence[HighlightRange]:
        if not self.palette:
            return ranges
        keys = set(self.palette)
        result = [
            r for r in ranges if r.style not in keys and not is_rainbow_overlay(r.style)
        ]
        log.debug("rainbow overlay removed: %d entries dropped", len(ranges) - len(result))
        return result


def apply_overlay(
    doc: DocumentText,
    header_ranges: Optional[Sequence[HighlightRange]],
    ranges: Sequence[HighlightRange],
    palette: Sequence[StyleId],
    policy: OverlayEmissionPolicy = OverlayEmissionPolicy.DUPLICATE_BEFORE_AND_AFTER,
) -> Sequence[HighlightRange]:
    return OverlayMerger(palette, policy=policy).apply(doc, header_ranges, ranges)


def remove_overlay(
    ranges: Sequence[HighlightRange], palette: Sequence[StyleId]
) -> Sequence[HighlightRange]:
    return OverlayMerger(palette).remove(ranges)


__all__ = [
    "OverlayEmissionPolicy",
    "OverlayMerger",
    "apply_overlay",
    "remove_overlay",
]
