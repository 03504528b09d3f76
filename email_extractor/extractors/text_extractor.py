"""
Plain text extractor.

Handles every buffer without a binary signature (txt, csv, json, xml, html, ...).
"""

from typing import ClassVar

from email_extractor.extractors.base import TextExtractor
from email_extractor.models import FormatTag, TextBlock


class PlainTextExtractor(TextExtractor):
    """
    Extracts lines from plain text.

    Decoding is lossy: invalid UTF-8 sequences become U+FFFD, so this
    extractor never fails.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[FormatTag, ...]] = (FormatTag.PLAIN_TEXT,)

    def extract(self, buffer: bytes) -> list[TextBlock]:
        """
        Split the decoded buffer into one block per line.

        Args:
            buffer: Raw file contents.

        Returns:
            One TextBlock per line, in document order.
        """
        text = bytes(buffer).decode("utf-8", errors="replace")
        return [TextBlock(text=line) for line in self._split_lines(text)]

    @staticmethod
    def _split_lines(text: str) -> list[str]:
        """
        Split on ``\\n`` and strip one trailing ``\\r`` per line.

        A trailing newline does not produce an extra empty line, and empty
        text has no lines.
        """
        if not text:
            return []

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()

        return [line[:-1] if line.endswith("\r") else line for line in lines]
