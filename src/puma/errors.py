"""Exception classes for Puma.

Provides standardized exceptions for error handling throughout Puma.
The default scan never raises; these are only used by opt-in checks.
"""

from __future__ import annotations


class PumaError(Exception):
    """Base exception for all Puma errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(PumaError):
    """Error during scanning.

    Raised in strict mode when the scanner meets a character no rule
    recognizes, or when the source exceeds the configured size limit.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            offset: Character offset where error occurred (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
