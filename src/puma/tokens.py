"""Token and TokenKind definitions for the Puma scanner.

The scanner produces a stream of Token objects that a parser consumes.
Each Token has a kind, the matched text, and a flat character offset.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    The set is fixed and exhaustive. Anything the recognition rules
    cannot classify is reported as UNKNOWN rather than raised.

    """

    KEYWORD = auto()
    INTEGER = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    STRING = auto()  # "..." with escapes
    CHAR = auto()  # '.'
    IDENTIFIER = auto()
    END_OF_LINE = auto()  # Normalized from \r\n, \r or \n
    UNKNOWN = auto()  # Single unrecognized character


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The exact lexeme from source ("\\n" for END_OF_LINE)
        offset: Zero-based character index where the token starts

    """

    kind: TokenKind
    text: str
    offset: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, @{self.offset})"

    @property
    def end(self) -> int:
        """Offset one past the last character of the lexeme.

        END_OF_LINE tokens always report a width of one, even when they
        were produced from a two-character ``\\r\\n`` sequence.
        """
        return self.offset + len(self.text)

    @property
    def is_keyword(self) -> bool:
        return self.kind is TokenKind.KEYWORD
