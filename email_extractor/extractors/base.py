"""
Base classes for text extraction.

Defines the error hierarchy and the abstract interface that every
extraction strategy implements, ensuring consistent behavior across
formats. Extractors work on in-memory buffers only.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from email_extractor.models import FormatTag, TextBlock


class ErrorKind(str, Enum):
    """Category of an extraction failure."""

    UNSUPPORTED_FORMAT = "unsupported_format"
    ARCHIVE_OPEN = "archive_open"
    MEMBER_READ = "member_read"
    PDF_DECODE = "pdf_decode"
    FILE_LOAD = "file_load"


class ExtractionError(Exception):
    """
    Raised when text extraction fails.

    Contains detailed information about the failure cause.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class UnsupportedFormatError(ExtractionError):
    """The buffer carries a signature outside the supported formats."""

    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, signature: str | None = None):
        self.signature = signature
        detail = f" ({signature})" if signature else ""
        super().__init__(f"Unsupported file type{detail}")


class ArchiveOpenError(ExtractionError):
    """The buffer looks like a zip archive but cannot be opened as one."""

    kind = ErrorKind.ARCHIVE_OPEN


class MemberReadError(ExtractionError):
    """An archive member could not be read or decoded as UTF-8."""

    kind = ErrorKind.MEMBER_READ

    def __init__(self, member: str, message: str, cause: Exception | None = None):
        self.member = member
        super().__init__(f"Failed to read '{member}' in archive: {message}", cause=cause)


class PdfDecodeError(ExtractionError):
    """PDF text extraction failed."""

    kind = ErrorKind.PDF_DECODE


class TextExtractor(ABC):
    """
    Abstract base class for extraction strategies.

    All extractors must implement the `extract` method and declare
    which format tags they handle via `SUPPORTED_FORMATS`.
    """

    # Class variable: each subclass must override with supported format tags
    SUPPORTED_FORMATS: ClassVar[tuple[FormatTag, ...]] = ()

    @classmethod
    def supports(cls, tag: FormatTag) -> bool:
        """
        Check if this extractor handles the given format tag.

        Args:
            tag: Format tag produced by the classifier.

        Returns:
            True if this extractor can handle the format.
        """
        return tag in cls.SUPPORTED_FORMATS

    @abstractmethod
    def extract(self, buffer: bytes) -> list[TextBlock]:
        """
        Extract text blocks from the buffer.

        Args:
            buffer: The complete file contents. It is never modified or kept.

        Returns:
            Text blocks in source order.

        Raises:
            ExtractionError: If extraction fails for any reason.
        """
        ...
