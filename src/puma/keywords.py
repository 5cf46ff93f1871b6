"""Reserved words of the Puma language.

An identifier-shaped lexeme whose text is in KEYWORDS is classified as a
keyword. Matching is case-sensitive. The set is built once at import time
and never written to afterwards.
"""

from __future__ import annotations

KEYWORDS = frozenset(
    {
        # Declarations
        "using",
        "as",
        "type",
        "trait",
        "module",
        "is",
        "has",
        "value",
        "object",
        "base",
        "number",
        "optional",
        # Sections
        "enums",
        "records",
        "properties",
        "functions",
        "start",
        "initialize",
        "finalize",
        "return",
        "yield",
        # Modifiers
        "public",
        "private",
        "internal",
        "override",
        "delegate",
        "constant",
        "readonly",
        "readwrite",
        # Built-in types
        "int128",
        "int64",
        "int32",
        "int16",
        "int8",
        "uint128",
        "uint64",
        "uint32",
        "uint16",
        "uint8",
        "flt128",
        "flt64",
        "flt32",
        "fix128",
        "fix64",
        "fix32",
        "char",
        "str",
        "fstr",
        "vstr",
        "bool",
        "true",
        "false",
        "hex",
        "oct",
        "bin",
        # Conversions and accessors
        "implicit",
        "explicit",
        "operator",
        "get",
        "set",
        "with",
        "self",
        # Control flow
        "if",
        "else",
        "and",
        "or",
        "not",
        "for",
        "in",
        "while",
        "repeat",
        "forall",
        "begin",
        "end",
        "break",
        "continue",
        "match",
        "when",
        "error",
        "catch",
        "multithread",
        "multiprocess",
    }
)


def is_keyword(text: str) -> bool:
    """Return True if text is a reserved Puma keyword."""
    return text in KEYWORDS


__all__ = ["KEYWORDS", "is_keyword"]
