"""
Signature-based format classifier.

Walks an ordered table of signature predicates and stops at the first
match. Order matters: office documents are zip archives themselves, so
their predicates run before the generic zip check.
"""

import logging
from typing import Callable

import filetype

from email_extractor.detection import signatures
from email_extractor.models import FormatTag, SignatureMatch

logger = logging.getLogger(__name__)

Predicate = Callable[[bytes], bool]

# Ordered registry of recognized signatures
_SIGNATURES: tuple[tuple[str, FormatTag, Predicate], ...] = (
    ("docx", FormatTag.ZIP_ARCHIVE, signatures.is_docx),
    ("pptx", FormatTag.ZIP_ARCHIVE, signatures.is_pptx),
    ("xlsx", FormatTag.ZIP_ARCHIVE, signatures.is_xlsx),
    ("odt", FormatTag.ZIP_ARCHIVE, signatures.is_odt),
    ("ods", FormatTag.ZIP_ARCHIVE, signatures.is_ods),
    ("odp", FormatTag.ZIP_ARCHIVE, signatures.is_odp),
    ("pdf", FormatTag.PDF, signatures.is_pdf),
    ("zip", FormatTag.ZIP_ARCHIVE, signatures.is_zip),
    ("xml", FormatTag.PLAIN_TEXT, signatures.is_xml),
    ("html", FormatTag.PLAIN_TEXT, signatures.is_html),
)

# Plain text formats (txt, csv, json, ...) carry no magic number at all.
_NO_SIGNATURE = SignatureMatch(name="text", tag=FormatTag.PLAIN_TEXT)


def identify(buffer: bytes | bytearray | memoryview) -> SignatureMatch:
    """
    Identify the signature of a byte buffer.

    Args:
        buffer: The complete file contents.

    Returns:
        The first matching signature. Buffers with no known signature are
        plain text; signatures known to `filetype` but not handled here
        are unsupported.
    """
    data = bytes(buffer)

    for name, tag, predicate in _SIGNATURES:
        if predicate(data):
            return SignatureMatch(name=name, tag=tag)

    if not data:
        return _NO_SIGNATURE

    kind = filetype.guess(data)
    if kind is None:
        return _NO_SIGNATURE

    logger.debug("Unsupported signature detected: %s (%s)", kind.extension, kind.mime)
    return SignatureMatch(name=kind.extension, tag=FormatTag.UNSUPPORTED)


def classify(buffer: bytes | bytearray | memoryview) -> FormatTag:
    """Classify a byte buffer into its format tag."""
    return identify(buffer).tag
