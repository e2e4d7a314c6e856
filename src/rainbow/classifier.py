"""
Sample classifier for preview text written in the Write language.

Scans keywords, identifiers, numbers, strings, comments and operators and
emits one highlight range per token, in document order. Identifiers are
tagged with a rainbow-eligible style; everything else with a plain style.
"""

from typing import List

from .ranges import HighlightRange
from .styles import COMMENT, IDENTIFIER, KEYWORD, NUMBER, OPERATOR, STRING, StyleId

KEYWORDS = {
    "set",
    "to",
    "print",
    "make",
    "input",
    "as",
    "if",
    "else",
    "end",
    "then",
    "while",
    "do",
    "for",
    "from",
    "and",
    "or",
    "not",
    "is",
    "greater",
    "less",
    "equal",
    "than",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "int",
    "float",
    "string",
    "bool",
    "list",
    "of",
    "size",
    "function",
    "end_function",
    "arguments",
    "return",
    "call",
    "with",
}

OPERATOR_CHARS = "=!<>&|+-*/^(),:"


class Classifier:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.start = 0
        self.ranges: List[HighlightRange] = []

    def scan(self) -> List[HighlightRange]:
        while not self._is_at_end():
            self.start = self.pos
            c = self._advance()

            if c in " \t\r\n":
                continue

            if c == "#":
                self._skip_until_newline()
                self._add(COMMENT)
                continue

            if c == '"':
                self._string()
                continue

            if c.isdigit():
                self._number()
                continue

            if c.isalpha() or c == "_":
                self._identifier()
                continue

            if c in OPERATOR_CHARS:
                # two-char comparisons: ==, !=, >=, <=
                if c in "=!<>":
                    self._match("=")
                self._add(OPERATOR)
                continue

            # Unknown characters stay unhighlighted.

        return self.ranges

    def _add(self, style: StyleId) -> None:
        self.ranges.append(HighlightRange(self.start, self.pos, style))

    def _is_at_end(self) -> bool:
        return self.pos >= self.length

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.pos]

    def _peek_next(self) -> str:
        if self.pos + 1 >= self.length:
            return "\0"
        return self.source[self.pos + 1]

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.pos] != expected:
            return False
        self.pos += 1
        return True

    def _skip_until_newline(self) -> None:
        while not self._is_at_end() and self._peek() != "\n":
            self._advance()

    def _string(self) -> None:
        # Quotes are part of the range; an unterminated string ends at the newline.
        escaped = False
        while not self._is_at_end() and self._peek() != "\n":
            ch = self._advance()
            if escaped:
                escaped = False
                continue
            if ch == "\\":
                escaped = True
                continue
            if ch == '"':
                break
        self._add(STRING)

    def _number(self) -> None:
        while self._peek().isdigit():
            self._advance()
        if self._peek() == "." and self._peek_next().isdigit():
            self._advance()  # consume '.'
            while self._peek().isdigit():
                self._advance()
        self._add(NUMBER)

    def _identifier(self) -> None:
        while self._peek().isalnum() or self._peek() == "_":
            self._advance()
        text = self.source[self.start : self.pos]
        self._add(KEYWORD if text in KEYWORDS else IDENTIFIER)


def classify(source: str) -> List[HighlightRange]:
    return Classifier(source).scan()


__all__ = ["Classifier", "classify", "KEYWORDS"]
