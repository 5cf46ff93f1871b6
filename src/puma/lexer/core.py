"""Rule-driven scanner for Puma source text.

Walks the source once, left to right. At each position it handles a line
ending, skips whitespace, or tries the recognition rules in priority order.
Anything else becomes a one-character UNKNOWN token.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from puma.config import ScanConfig, get_scan_config
from puma.errors import ScanError
from puma.keywords import KEYWORDS
from puma.lexer.rules import RULES
from puma.tokens import Token, TokenKind
from puma.utils.logger import get_logger

logger = get_logger(__name__)

# Information separators FS, GS, RS and US are str.isspace() but are
# scanned as UNKNOWN, not skipped.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """Return True if char is skipped between tokens."""
    return char.isspace() and char not in _SEPARATORS


class Scanner:
    """Single-pass scanner producing Puma tokens on demand.

    Usage:
            >>> scanner = Scanner("if x\\n")
            >>> for token in scanner.tokenize():
            ...     print(token)
        Token(KEYWORD, 'if', @0)
        Token(IDENTIFIER, 'x', @3)
        Token(END_OF_LINE, '\\n', @4)

    The token stream is forward-only. Once tokenize() has been exhausted
    the scanner is spent; scan the source again with a new Scanner.

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_source_file",
        "_config",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Puma source text
            source_file: Optional source file path for error messages
            config: Scan configuration; defaults to the active context config
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            ScanError: Only under a strict or size-limited ScanConfig.

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        self._check_source_length()

        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            pos = self._pos

            eol_len = self._line_ending_length(pos)
            if eol_len:
                self._pos = pos + eol_len
                if pos > 0 and source[pos - 1] == "\\":
                    logger.debug("Line continuation at offset %d", pos)
                    continue
                yield Token(TokenKind.END_OF_LINE, "\n", pos)
                continue

            if is_whitespace(source[pos]):
                self._pos = pos + 1
                continue

            token = self._match_rules(pos)
            if token is None:
                token = self._unknown(pos)
            self._pos = pos + len(token.text)
            yield token

    # =========================================================================
    # Helpers
    # =========================================================================

    def _line_ending_length(self, pos: int) -> int:
        """Return the length of the line ending at pos (\\r\\n, \\r or \\n), or 0."""
        char = self._source[pos]
        if char == "\r":
            if pos + 1 < self._source_len and self._source[pos + 1] == "\n":
                return 2
            return 1
        if char == "\n":
            return 1
        return 0

    def _match_rules(self, pos: int) -> Token | None:
        """Try each rule in priority order; first match wins."""
        for rule in RULES:
            text = rule.match(self._source, pos)
            if text is None:
                continue
            kind = rule.kind
            if kind is TokenKind.IDENTIFIER and text in KEYWORDS:
                kind = TokenKind.KEYWORD
            return Token(kind, text, pos)
        return None

    def _unknown(self, pos: int) -> Token:
        char = self._source[pos]
        if self._config.strict:
            raise ScanError(
                f"Unexpected character {char!r}",
                offset=pos,
                source_file=self._source_file,
            )
        logger.debug("Unknown character %r at offset %d", char, pos)
        return Token(TokenKind.UNKNOWN, char, pos)

    def _check_source_length(self) -> None:
        limit = self._config.max_source_length
        if limit is not None and self._source_len > limit:
            raise ScanError(
                f"Source is {self._source_len} characters, limit is {limit}",
                source_file=self._source_file,
            )


def scan(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Token]:
    """Scan Puma source into a lazy token stream.

    Args:
        source: Puma source text
        source_file: Optional source file path for error messages
        config: Scan configuration; defaults to the active context config

    Returns:
        Iterator of Token, produced as it is consumed

    Example:
        >>> [t.text for t in scan("x = 3.14")]
        ['x', '=', '3.14']
    """
    return Scanner(source, source_file=source_file, config=config).tokenize()
