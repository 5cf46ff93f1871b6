"""Scanner for the Puma programming language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, scan, is_whitespace, Rule, RULES
├── core.py              # Scanner class (line endings, whitespace, dispatch)
└── rules.py             # Ordered recognition rules (kind, pattern)

Usage:
    >>> from puma.lexer import Scanner
    >>> for token in Scanner("value x\\n").tokenize():
    ...     print(token)
Token(KEYWORD, 'value', @0)
Token(IDENTIFIER, 'x', @6)
Token(END_OF_LINE, '\\n', @7)

"""

from puma.lexer.core import Scanner, is_whitespace, scan
from puma.lexer.rules import RULES, Rule

__all__ = ["RULES", "Rule", "Scanner", "is_whitespace", "scan"]
