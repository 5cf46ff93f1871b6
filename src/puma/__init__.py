"""
Puma — Lexical scanner for the Puma programming language.

Turns Puma source text into a lazy stream of classified tokens for a
parser to consume. Zero runtime dependencies.

Quick Start:
    >>> from puma import scan
    >>> for token in scan("if x\\n"):
    ...     print(token)
    Token(KEYWORD, 'if', @0)
    Token(IDENTIFIER, 'x', @3)
    Token(END_OF_LINE, '\\n', @4)

Strict Mode:
    >>> from puma import ScanConfig, scan_config_context
    >>> with scan_config_context(ScanConfig(strict=True)):
    ...     tokens = list(scan("x @ y"))  # raises ScanError at '@'
"""

from puma.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from puma.errors import PumaError, ScanError
from puma.keywords import KEYWORDS, is_keyword
from puma.lexer import RULES, Rule, Scanner, scan
from puma.serialization import from_dict, from_json, to_dict, to_json
from puma.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Scanning
    "scan",
    "Scanner",
    "Rule",
    "RULES",
    # Tokens
    "Token",
    "TokenKind",
    # Keywords
    "KEYWORDS",
    "is_keyword",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "PumaError",
    "ScanError",
]
