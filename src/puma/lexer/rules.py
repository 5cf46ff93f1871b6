"""Recognition rules for the Puma scanner.

Each rule pairs a token kind with a compiled pattern. Rules are tried in
the declared order of RULES and the first one that matches at the cursor
wins. There is no longest-match arbitration between rules:

- FLOAT precedes INTEGER so ``3.14`` is one token, not ``3`` ``.`` ``14``.
- BOOLEAN precedes IDENTIFIER, so ``true``/``false`` are literals. It also
  means ``trueish`` scans as BOOLEAN ``true`` followed by IDENTIFIER ``ish``.

Patterns are applied with ``Pattern.match(source, pos)``, which anchors them
at the cursor without slicing the source.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from puma.tokens import TokenKind


@dataclass(frozen=True, slots=True)
class Rule:
    """A (kind, pattern) pair tested at the scanner cursor."""

    kind: TokenKind
    pattern: re.Pattern[str]

    def match(self, source: str, pos: int) -> str | None:
        """Return the lexeme matched at pos, or None.

        Empty matches are treated as no match.
        """
        m = self.pattern.match(source, pos)
        if m is None or m.end() == pos:
            return None
        return m.group()


FLOAT_PATTERN = re.compile(r"\d+\.\d+")
INTEGER_PATTERN = re.compile(r"\d+")
BOOLEAN_PATTERN = re.compile(r"true|false")

# String: '"' (escaped char | non-quote char)* '"', an escaped char being a
# backslash plus anything but a newline. The first branch resolves each
# backslash one way (escape unless a newline or the end follows) and closes
# at the first unescaped quote. When that walk runs off the end, the literal
# closes at the last quote in the source instead.
STRING_PATTERN = re.compile(r'"(?:[^"\\]|\\[^\n]|\\(?![^\n]))*"|"[\s\S]*"')

CHAR_PATTERN = re.compile(r"'(?:\\.|[^'])'")
IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

# Priority order. Do not sort.
RULES: tuple[Rule, ...] = (
    Rule(TokenKind.FLOAT, FLOAT_PATTERN),
    Rule(TokenKind.INTEGER, INTEGER_PATTERN),
    Rule(TokenKind.BOOLEAN, BOOLEAN_PATTERN),
    Rule(TokenKind.STRING, STRING_PATTERN),
    Rule(TokenKind.CHAR, CHAR_PATTERN),
    Rule(TokenKind.IDENTIFIER, IDENTIFIER_PATTERN),
)


__all__ = [
    "BOOLEAN_PATTERN",
    "CHAR_PATTERN",
    "FLOAT_PATTERN",
    "IDENTIFIER_PATTERN",
    "INTEGER_PATTERN",
    "RULES",
    "Rule",
    "STRING_PATTERN",
]
