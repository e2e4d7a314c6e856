import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from PySide6 import QtGui  # noqa: E402

from gui.highlighter import PreviewHighlighter, build_formats  # noqa: E402
from rainbow.merger import OverlayEmissionPolicy, apply_overlay  # noqa: E402
from rainbow.ranges import HighlightRange, TextDocument  # noqa: E402
from rainbow.styles import IDENTIFIER, KEYWORD, make_palette  # noqa: E402

SYNTAX = {"keyword": "#0000ff", "identifier": "#000000"}
RAINBOW = ["#ff0000", "#00ff00"]


def foreground_at(document: QtGui.QTextDocument, pos: int) -> str:
    block = document.findBlock(pos)
    offset = pos - block.position()
    for fr in block.layout().formats():
        if fr.start <= offset < fr.start + fr.length:
            return fr.format.foreground().color().name()
    return ""


def paint(text, ranges, palette):
    document = QtGui.QTextDocument(text)
    highlighter = PreviewHighlighter(document)
    highlighter.set_formats(build_formats(SYNTAX, palette, RAINBOW))
    highlighter.set_ranges(ranges)
    highlighter.rehighlight()
    return document, highlighter


def test_formats_cover_styles_and_palette(qapp):
    palette = make_palette(3)
    formats = build_formats(SYNTAX, palette, RAINBOW)
    assert formats[KEYWORD].font().bold()
    assert formats[IDENTIFIER].foreground().color().name() == "#000000"
    assert [formats[s].foreground().color().name() for s in palette] == [
        "#ff0000",
        "#00ff00",
        "#ff0000",
    ]


def test_plain_ranges_are_painted(qapp):
    document, _ = paint("set x", [HighlightRange(0, 3, KEYWORD)], make_palette(2))
    assert foreground_at(document, 1) == "#0000ff"


def test_duplicate_overlay_wins_over_base_style(qapp):
    palette = make_palette(2)
    text = "set x"
    ranges = [HighlightRange(0, 3, KEYWORD), HighlightRange(4, 5, IDENTIFIER)]
    merged = apply_overlay(TextDocument(text), None, ranges, palette)
    overlay_color = build_formats(SYNTAX, palette, RAINBOW)[merged[1].style]
    document, _ = paint(text, merged, palette)
    assert foreground_at(document, 4) == overlay_color.foreground().color().name()


def test_overlay_before_only_is_covered_by_base_style(qapp):
    palette = make_palette(2)
    overlay = HighlightRange(4, 5, palette[0])
    base = HighlightRange(4, 5, IDENTIFIER)
    document, _ = paint("set x", [overlay, base], palette)
    assert foreground_at(document, 4) == "#000000"


def test_ranges_spanning_blocks(qapp):
    palette = make_palette(2)
    ranges = [HighlightRange(0, 7, KEYWORD)]
    document, _ = paint("abc\ndef", ranges, palette)
    assert foreground_at(document, 1) == "#0000ff"
    assert foreground_at(document, 5) == "#0000ff"


def test_single_after_policy_also_shows_overlay(qapp):
    palette = make_palette(2)
    ranges = [HighlightRange(0, 1, IDENTIFIER)]
    merged = apply_overlay(
        TextDocument("x"), None, ranges, palette, OverlayEmissionPolicy.SINGLE_AFTER
    )
    document, _ = paint("x", merged, palette)
    assert foreground_at(document, 0) in RAINBOW
