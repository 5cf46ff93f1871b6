"""Token serialization — JSON round-trip for Puma token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Handing a token stream to an out-of-process parser
- Snapshot tests and debugging

All output is deterministic (sorted keys).

Example:
    from puma import scan
    from puma.serialization import to_json, from_json

    tokens = list(scan("value x"))
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from puma.tokens import Token, TokenKind


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The kind is stored by enum member name.
    """
    return {"kind": token.kind.name, "text": token.text, "offset": token.offset}


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a Token from a dict produced by to_dict.

    Raises:
        ValueError: If ``kind`` is missing or unknown, or a field is missing.

    """
    if not isinstance(data, dict):
        msg = f"Expected a token object, got {type(data).__name__}"
        raise ValueError(msg)

    kind_name = data.get("kind")
    if kind_name is None:
        msg = "Missing 'kind' field in serialized token"
        raise ValueError(msg)

    try:
        kind = TokenKind[kind_name]
    except KeyError:
        msg = f"Unknown token kind: {kind_name!r}"
        raise ValueError(msg) from None

    try:
        return Token(kind=kind, text=data["text"], offset=data["offset"])
    except KeyError as e:
        msg = f"Missing {e.args[0]!r} field in serialized token"
        raise ValueError(msg) from None


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Consumes the iterable, so a lazy scan is drained here.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Raises:
        ValueError: If the JSON isn't an array of token objects.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
