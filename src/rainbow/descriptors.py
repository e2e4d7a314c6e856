"""Attribute descriptors shown in the settings list and the panel each one uses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from .styles import StyleId


class DescriptorKind(Enum):
    COLOR = auto()
    RAINBOW = auto()


class PanelKind(Enum):
    COLOR_AND_FONT = auto()
    RAINBOW = auto()


@dataclass(frozen=True)
class ColorDescriptor:
    display_name: str
    style: StyleId
    kind: DescriptorKind = field(default=DescriptorKind.COLOR, init=False)


@dataclass(frozen=True)
class RainbowDescriptor:
    display_name: str
    language: str
    kind: DescriptorKind = field(default=DescriptorKind.RAINBOW, init=False)


Descriptor = Union[ColorDescriptor, RainbowDescriptor]


def panel_for_descriptor(descriptor: Descriptor) -> PanelKind:
    kind = getattr(descriptor, "kind", None)
    if kind is DescriptorKind.RAINBOW:
        return PanelKind.RAINBOW
    if kind is DescriptorKind.COLOR:
        return PanelKind.COLOR_AND_FONT
    raise TypeError(f"Unhandled descriptor: {descriptor!r}")


__all__ = [
    "DescriptorKind",
    "PanelKind",
    "ColorDescriptor",
    "RainbowDescriptor",
    "Descriptor",
    "panel_for_descriptor",
]
