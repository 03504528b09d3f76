"""
Extractor factory module.

Provides the single dispatch point from a format tag to its extraction
strategy, and a convenience function that classifies and extracts a
buffer in one step.
"""

import logging

from email_extractor.detection import identify
from email_extractor.extractors.base import TextExtractor, UnsupportedFormatError
from email_extractor.extractors.pdf_extractor import PDFExtractor
from email_extractor.extractors.text_extractor import PlainTextExtractor
from email_extractor.extractors.zip_extractor import ZipXmlExtractor
from email_extractor.models import ExtractedDocument, FormatTag, TextBlock

logger = logging.getLogger(__name__)

# Registry of all available extractors
_EXTRACTORS: tuple[type[TextExtractor], ...] = (
    PlainTextExtractor,
    PDFExtractor,
    ZipXmlExtractor,
)


def get_supported_formats() -> tuple[FormatTag, ...]:
    """
    Get all format tags that have an extraction strategy.

    Returns:
        Tuple of supported format tags.
    """
    formats: list[FormatTag] = []
    for extractor_cls in _EXTRACTORS:
        formats.extend(extractor_cls.SUPPORTED_FORMATS)
    return tuple(formats)


def create_extractor(tag: FormatTag, signature: str | None = None) -> TextExtractor:
    """
    Create the extractor for a format tag.

    Args:
        tag: Format tag produced by the classifier.
        signature: Name of the matched signature, used in error messages.

    Returns:
        An instance of the matching TextExtractor subclass.

    Raises:
        UnsupportedFormatError: If no extractor handles the tag.
    """
    for extractor_cls in _EXTRACTORS:
        if extractor_cls.supports(tag):
            return extractor_cls()

    raise UnsupportedFormatError(signature)


def extract(tag: FormatTag, buffer: bytes, signature: str | None = None) -> list[TextBlock]:
    """
    Run the extraction strategy for a format tag.

    Args:
        tag: Format tag produced by the classifier.
        buffer: The complete file contents.
        signature: Name of the matched signature, used in error messages.

    Returns:
        Text blocks in source order.

    Raises:
        ExtractionError: If the format is unsupported or extraction fails.
    """
    extractor = create_extractor(tag, signature)
    logger.debug("Extracting %s buffer of %d bytes with %s", tag.value, len(buffer), type(extractor).__name__)
    return extractor.extract(buffer)


def extract_buffer(buffer: bytes, source_path: str | None = None) -> ExtractedDocument:
    """
    Classify a buffer and extract its text.

    Convenience function that identifies the format and performs the
    extraction in one step.

    Args:
        buffer: The complete file contents.
        source_path: Where the buffer came from, recorded on the result.

    Returns:
        ExtractedDocument containing the text blocks.

    Raises:
        ExtractionError: If extraction fails.
    """
    match = identify(buffer)
    blocks = extract(match.tag, buffer, signature=match.name)
    return ExtractedDocument(
        format=match.tag,
        signature=match.name,
        byte_size=len(buffer),
        source_path=source_path,
        blocks=tuple(blocks),
    )
