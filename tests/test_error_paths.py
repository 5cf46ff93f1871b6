"""Error-path and malformed input tests.

The default scan never raises: malformed input is reported as UNKNOWN
tokens. These tests cover that contract and the formatting of ScanError
for the opt-in checks.
"""

import pytest

from puma import PumaError, ScanConfig, ScanError, TokenKind, scan

# =========================================================================
# ScanError construction and formatting
# =========================================================================


class TestScanErrorFormatting:
    """Verify ScanError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ScanError("unexpected character")
        assert str(err) == "unexpected character"
        assert err.offset is None
        assert err.source_file is None

    def test_with_offset(self) -> None:
        err = ScanError("bad character", offset=42)
        assert str(err) == "42 bad character"

    def test_offset_zero_is_kept(self) -> None:
        assert str(ScanError("bad", offset=0)) == "0 bad"

    def test_with_source_file(self) -> None:
        err = ScanError("bad", offset=7, source_file="main.puma")
        assert str(err) == "main.puma:7 bad"

    def test_source_file_without_offset(self) -> None:
        assert str(ScanError("too long", source_file="main.puma")) == "main.puma too long"

    def test_is_puma_error(self) -> None:
        assert isinstance(ScanError("x"), PumaError)


class TestStrictErrorsCarryLocation:
    """Errors raised while scanning point at the offending character."""

    def test_source_file_propagates(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            list(scan("ok\n  ~", source_file="lib.puma", config=ScanConfig(strict=True)))
        err = exc_info.value
        assert err.offset == 5
        assert err.source_file == "lib.puma"
        assert str(err) == "lib.puma:5 Unexpected character '~'"


# =========================================================================
# Default mode never raises
# =========================================================================


class TestMalformedInputIsData:
    """Malformed input yields UNKNOWN tokens instead of errors."""

    @pytest.mark.parametrize(
        "source",
        [
            '"never closed',
            "'",
            "'ab",
            "\\",
            "\\\\\\",
            "1.",
            "#!@$%^&*",
            "\x00\x01\x02",
            "\u200b",
        ],
    )
    def test_scan_completes(self, source: str) -> None:
        tokens = list(scan(source))
        assert tokens
        assert any(t.kind == TokenKind.UNKNOWN for t in tokens)

    def test_lone_backslash_at_end(self) -> None:
        assert [(t.kind, t.text) for t in scan("x \\")] == [
            (TokenKind.IDENTIFIER, "x"),
            (TokenKind.UNKNOWN, "\\"),
        ]

    def test_unknown_run_is_one_token_per_character(self) -> None:
        tokens = list(scan("<=>"))
        assert [t.text for t in tokens] == ["<", "=", ">"]
        assert [t.offset for t in tokens] == [0, 1, 2]
