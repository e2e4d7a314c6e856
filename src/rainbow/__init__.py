from .styles import (
    StyleId,
    StyleKind,
    is_rainbow_eligible,
    is_rainbow_overlay,
    make_palette,
)
from .ranges import HighlightRange, InvalidRangeError, TextDocument
from .slots import ColorSlotAssigner, LeastUsedProbe, LinearProbe, NoProbe, rainbow_hash
from .merger import OverlayEmissionPolicy, OverlayMerger, apply_overlay, remove_overlay
from .demo_line import build_demo_line
from .classifier import Classifier
from .descriptors import ColorDescriptor, PanelKind, RainbowDescriptor
from .page import PreviewPage
from .session import PreviewState, SwitcherState, update_preview

__all__ = [
    "StyleId",
    "StyleKind",
    "is_rainbow_eligible",
    "is_rainbow_overlay",
    "make_palette",
    "HighlightRange",
    "InvalidRangeError",
    "TextDocument",
    "ColorSlotAssigner",
    "LeastUsedProbe",
    "LinearProbe",
    "NoProbe",
    "rainbow_hash",
    "OverlayEmissionPolicy",
    "OverlayMerger",
    "apply_overlay",
    "remove_overlay",
    "build_demo_line",
    "Classifier",
    "ColorDescriptor",
    "PanelKind",
    "RainbowDescriptor",
    "PreviewPage",
    "PreviewState",
    "SwitcherState",
    "update_preview",
]
