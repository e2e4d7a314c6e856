import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from rainbow.classifier import Classifier  # noqa: E402
from rainbow.styles import (  # noqa: E402
    COMMENT,
    IDENTIFIER,
    KEYWORD,
    NUMBER,
    OPERATOR,
    STRING,
)


def spans(code: str):
    return [(r.start, r.end, r.style) for r in Classifier(code).scan()]


def test_assignment_with_comment():
    assert spans("set x to 3 # hi") == [
        (0, 3, KEYWORD),  # set
        (4, 5, IDENTIFIER),  # x
        (6, 8, KEYWORD),  # to
        (9, 10, NUMBER),  # 3
        (11, 15, COMMENT),  # # hi
    ]


def test_string_includes_quotes():
    assert spans('print "a b"') == [(0, 5, KEYWORD), (6, 11, STRING)]


def test_two_char_operators():
    assert spans("a >= 2.5") == [
        (0, 1, IDENTIFIER),
        (2, 4, OPERATOR),
        (5, 8, NUMBER),
    ]


def test_unterminated_string_stops_at_newline():
    assert spans('print "oops\nset') == [
        (0, 5, KEYWORD),
        (6, 11, STRING),
        (12, 15, KEYWORD),
    ]


def test_unknown_characters_are_skipped():
    assert spans("x @ y") == [(0, 1, IDENTIFIER), (4, 5, IDENTIFIER)]


def test_offsets_span_lines():
    code = "make total as int\nprint total"
    idents = [code[s:e] for s, e, style in spans(code) if style == IDENTIFIER]
    assert idents == ["total", "total"]
