"""Preview updates for the colour settings page.

The switcher state (which description panel is active) and the preview
state (text plus highlight ranges) are plain immutable values: every
operation takes the current value and returns a new one, and the caller
publishes it in a single assignment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .demo_line import build_demo_line
from .descriptors import Descriptor, DescriptorKind, PanelKind, panel_for_descriptor
from .merger import OverlayEmissionPolicy, OverlayMerger
from .page import PreviewPage
from .ranges import HighlightRange, TextDocument, shift_ranges
from .styles import RAINBOW_STOP_COUNT, StyleId

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwitcherState:
    active: Optional[PanelKind] = None


@dataclass(frozen=True)
class PreviewState:
    text: str = ""
    ranges: Tuple[HighlightRange, ...] = ()
    scroll_to: Optional[Tuple[HighlightRange, ...]] = None


def reset(state: SwitcherState, descriptor: Descriptor) -> SwitcherState:
    active = panel_for_descriptor(descriptor)
    if active is state.active:
        return state
    return SwitcherState(active)


def reset_default(state: SwitcherState) -> SwitcherState:
    if state.active is None:
        return state
    return SwitcherState()


def update_preview(
    page: PreviewPage,
    descriptor: Descriptor,
    switcher: SwitcherState,
    previous: PreviewState,
    rainbow_on: bool,
    palette: Sequence[StyleId],
    stop_interval: int = RAINBOW_STOP_COUNT,
    policy: OverlayEmissionPolicy = OverlayEmissionPolicy.DUPLICATE_BEFORE_AND_AFTER,
) -> PreviewState:
    is_rainbow_descriptor = descriptor.kind is DescriptorKind.RAINBOW
    if page.supports_rainbow and is_rainbow_descriptor:
        demo_text = page.rainbow_demo_text
    else:
        demo_text = page.demo_text

    merger = OverlayMerger(palette, is_eligible=page.is_rainbow_type, policy=policy)
    header_ranges = None

    if page.supports_rainbow and rainbow_on:
        if switcher.active is PanelKind.RAINBOW and palette:
            header_text, header_ranges = build_demo_line(palette, stop_interval)
            text = header_text + "\n" + demo_text
            offset = len(header_text) + 1
        else:
            text = demo_text
            offset = 0
        base = _base_ranges(page, previous, text, demo_text, offset)
        ranges = merger.apply(TextDocument(text), header_ranges, base)
    else:
        text = demo_text
        base = _base_ranges(page, previous, text, demo_text, 0)
        ranges = merger.remove(base)

    log.debug(
        "preview updated for %s: %d ranges, rainbow %s",
        descriptor.display_name,
        len(ranges),
        "on" if rainbow_on else "off",
    )
    scroll_to = None
    if is_rainbow_descriptor and header_ranges is not None:
        scroll_to = tuple(header_ranges)
    return PreviewState(text, tuple(ranges), scroll_to)


def _base_ranges(
    page: PreviewPage, previous: PreviewState, text: str, demo_text: str, offset: int
) -> Sequence[HighlightRange]:
    # Same text: start from the published ranges, overlays included; the
    # merge drops stale overlays before deriving new ones.
    if previous.text == text:
        return previous.ranges
    return shift_ranges(page.highlight(demo_text), offset)


__all__ = [
    "SwitcherState",
    "PreviewState",
    "reset",
    "reset_default",
    "update_preview",
]
