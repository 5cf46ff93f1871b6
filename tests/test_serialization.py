"""Tests for puma.serialization — token JSON round-trip."""

import json

import pytest

from puma import scan
from puma.serialization import from_dict, from_json, to_dict, to_json
from puma.tokens import Token, TokenKind


class TestToDict:
    def test_fields(self) -> None:
        token = Token(TokenKind.KEYWORD, "module", 3)
        assert to_dict(token) == {"kind": "KEYWORD", "text": "module", "offset": 3}

    def test_end_of_line_text_is_normalized(self) -> None:
        token = next(scan("\r\n"))
        assert to_dict(token) == {"kind": "END_OF_LINE", "text": "\n", "offset": 0}


class TestFromDict:
    def test_reconstructs_token(self) -> None:
        data = {"kind": "CHAR", "text": "'x'", "offset": 9}
        assert from_dict(data) == Token(TokenKind.CHAR, "'x'", 9)

    def test_missing_kind(self) -> None:
        with pytest.raises(ValueError, match="Missing 'kind'"):
            from_dict({"text": "x", "offset": 0})

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown token kind: 'COMMENT'"):
            from_dict({"kind": "COMMENT", "text": "#", "offset": 0})

    def test_missing_field(self) -> None:
        with pytest.raises(ValueError, match="Missing 'offset'"):
            from_dict({"kind": "INTEGER", "text": "1"})

    def test_not_a_dict(self) -> None:
        with pytest.raises(ValueError, match="Expected a token object"):
            from_dict(["INTEGER", "1", 0])  # type: ignore[arg-type]


class TestJson:
    def test_round_trip_of_scanned_source(self) -> None:
        source = 'module m\r\n  value s = "a\\"b" \\\n  x = 3.14\n'
        tokens = list(scan(source))
        assert from_json(to_json(tokens)) == tokens

    def test_output_is_deterministic(self) -> None:
        text = to_json(scan("if x"))
        assert text == to_json(scan("if x"))
        assert json.loads(text)[0] == {"kind": "KEYWORD", "offset": 0, "text": "if"}

    def test_accepts_lazy_stream(self) -> None:
        assert json.loads(to_json(scan("a b"))) == [
            {"kind": "IDENTIFIER", "offset": 0, "text": "a"},
            {"kind": "IDENTIFIER", "offset": 2, "text": "b"},
        ]

    def test_empty_stream(self) -> None:
        assert to_json(scan("")) == "[]"
        assert from_json("[]") == []

    def test_indent(self) -> None:
        assert "\n" in to_json(scan("x"), indent=2)

    def test_rejects_non_array(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON array"):
            from_json('{"kind": "INTEGER", "text": "1", "offset": 0}')
