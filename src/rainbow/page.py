"""Settings page model: the demo texts and which styles are rainbow-eligible."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .classifier import classify
from .descriptors import ColorDescriptor, Descriptor, RainbowDescriptor
from .ranges import HighlightRange
from .styles import PLAIN_STYLES, RAINBOW_STYLES, StyleId

WRITE_DEMO_TEXT = """# Greatest common divisor
function "gcd"(a:int, b:int)
    while b != 0 do
        set t to b
        set b to a - b * (a / b)
        set a to t
    end while
    return a
end_function

make total as int
set total to call "gcd" with arguments:(48, 18)
print "gcd = " total
"""

WRITE_RAINBOW_DEMO_TEXT = """# Every variable keeps its own colour
make width as int
make height as int
make area as int
set width to 12
set height to 7
set area to multiply width and height
for row from 1 to height do
    print row area
end for
"""


class PreviewPage:
    def __init__(
        self,
        name: str,
        demo_text: str,
        rainbow_demo_text: Optional[str] = None,
        plain_styles: Iterable[StyleId] = PLAIN_STYLES,
        rainbow_styles: Iterable[StyleId] = RAINBOW_STYLES,
    ):
        self.name = name
        self.demo_text = demo_text
        self.rainbow_demo_text = rainbow_demo_text
        self.plain_styles = list(plain_styles)
        self.rainbow_styles = set(rainbow_styles)

    @property
    def supports_rainbow(self) -> bool:
        return self.rainbow_demo_text is not None and bool(self.rainbow_styles)

    def is_rainbow_type(self, style: object) -> bool:
        return isinstance(style, StyleId) and style in self.rainbow_styles

    def highlight(self, text: str) -> List[HighlightRange]:
        return classify(text)

    def descriptors(self) -> List[Descriptor]:
        items: List[Descriptor] = [
            ColorDescriptor(style.name.replace("_", " ").title(), style)
            for style in self.plain_styles
        ]
        if self.supports_rainbow:
            items.append(RainbowDescriptor("Semantic highlighting", self.name))
        return items


def write_language_page() -> PreviewPage:
    return PreviewPage("Write", WRITE_DEMO_TEXT, WRITE_RAINBOW_DEMO_TEXT)


__all__ = [
    "PreviewPage",
    "write_language_page",
    "WRITE_DEMO_TEXT",
    "WRITE_RAINBOW_DEMO_TEXT",
]
