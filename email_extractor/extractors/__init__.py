"""
Text Extraction Module.

Provides a unified interface for extracting text from each supported
container format:
- Plain text (anything without a binary signature)
- PDF
- Zip archives, including docx, xlsx, pptx, odt, ods and odp
"""

from email_extractor.extractors.base import (
    ArchiveOpenError,
    ErrorKind,
    ExtractionError,
    MemberReadError,
    PdfDecodeError,
    TextExtractor,
    UnsupportedFormatError,
)
from email_extractor.extractors.factory import create_extractor, extract, extract_buffer

__all__ = [
    "ArchiveOpenError",
    "ErrorKind",
    "ExtractionError",
    "MemberReadError",
    "PdfDecodeError",
    "TextExtractor",
    "UnsupportedFormatError",
    "create_extractor",
    "extract",
    "extract_buffer",
]
