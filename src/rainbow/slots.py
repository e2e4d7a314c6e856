"""Colour-slot assignment for rainbow identifiers.

An assignment table (identifier text -> slot index) lives for one merge pass.
Within a pass the same text always gets the same slot; a new text starts at
``hash mod palette_size`` and the probe strategy decides where it ends up
when that slot is already taken.
"""

from __future__ import annotations

import zlib
from collections import Counter
from typing import Dict, Optional, Protocol

AssignmentTable = Dict[str, int]

SlotUsage = Counter

RAINBOW_HASH_SEED = 0x55AA


def rainbow_hash(text: str) -> int:
    return zlib.crc32(text.encode("utf-8"), RAINBOW_HASH_SEED)


class ProbeStrategy(Protocol):
    def choose(self, usage: SlotUsage, candidate: int, size: int) -> int: ...


class NoProbe:
    """Collision avoidance off: the hash-derived slot is used as is."""

    def choose(self, usage: SlotUsage, candidate: int, size: int) -> int:
        return candidate


class LinearProbe:
    """Step to the next free slot; reuse the candidate once all are taken."""

    def choose(self, usage: SlotUsage, candidate: int, size: int) -> int:
        for step in range(size):
            slot = (candidate + step) % size
            if not usage[slot]:
                return slot
        return candidate


class LeastUsedProbe:
    """Step to the next slot with the lowest usage count.

    Same as LinearProbe until the palette fills up; after that identifiers
    are spread evenly over the slots instead of piling onto the candidate.
    """

    def choose(self, usage: SlotUsage, candidate: int, size: int) -> int:
        lowest = min(usage[slot] for slot in range(size))
        for step in range(size):
            slot = (candidate + step) % size
            if usage[slot] == lowest:
                return slot
        return candidate


class ColorSlotAssigner:
    def __init__(self, palette_size: int, strategy: Optional[ProbeStrategy] = None):
        if palette_size <= 0:
            raise ValueError(f"palette size must be positive, got {palette_size}")
        self.palette_size = palette_size
        self.strategy = strategy if strategy is not None else LinearProbe()

    def slot_for(
        self,
        table: AssignmentTable,
        identifier: str,
        hash_value: int,
        usage: Optional[SlotUsage] = None,
    ) -> int:
        """Return the slot of ``identifier``, assigning one if it is new.

        ``usage`` counts identifiers per slot for ``table``; callers assigning
        many identifiers pass the same counter every time so it is updated in
        place instead of being rebuilt from the table.
        """
        slot = table.get(identifier)
        if slot is not None:
            return slot
        if usage is None:
            usage = Counter(table.values())
        candidate = hash_value % self.palette_size
        slot = self.strategy.choose(usage, candidate, self.palette_size)
        table[identifier] = slot
        usage[slot] += 1
        return slot


__all__ = [
    "AssignmentTable",
    "SlotUsage",
    "RAINBOW_HASH_SEED",
    "rainbow_hash",
    "ProbeStrategy",
    "NoProbe",
    "LinearProbe",
    "LeastUsedProbe",
    "ColorSlotAssigner",
]
