"""
PDF text extractor using PyMuPDF.

PyMuPDF (fitz) opens the document straight from memory, so no temporary
file is needed.
"""

import logging
from typing import ClassVar

import fitz  # PyMuPDF

from email_extractor.extractors.base import PdfDecodeError, TextExtractor
from email_extractor.models import FormatTag, TextBlock

logger = logging.getLogger(__name__)


class PDFExtractor(TextExtractor):
    """
    Extracts the text layer of a PDF as a single block.

    The text of all pages is concatenated in reading order.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[FormatTag, ...]] = (FormatTag.PDF,)

    def extract(self, buffer: bytes) -> list[TextBlock]:
        """
        Extract text from a PDF buffer.

        Args:
            buffer: Raw PDF bytes.

        Returns:
            A single TextBlock holding the text of every page.

        Raises:
            PdfDecodeError: If the PDF is encrypted, corrupted or unreadable.
        """
        try:
            with fitz.open(stream=bytes(buffer), filetype="pdf") as doc:
                if doc.needs_pass:
                    raise PdfDecodeError("Failed to extract PDF text. The document is encrypted.")

                if doc.page_count == 0:
                    raise PdfDecodeError("Failed to extract PDF text. The document has no pages.")

                text = "".join(page.get_text("text") for page in doc)
                logger.debug("Extracted %d characters from %d PDF pages", len(text), doc.page_count)

        except fitz.EmptyFileError as e:
            raise PdfDecodeError("Failed to extract PDF text. The document is empty.", cause=e) from e
        except fitz.FileDataError as e:
            raise PdfDecodeError(f"Failed to extract PDF text. {e}.", cause=e) from e
        except PdfDecodeError:
            raise
        except Exception as e:
            raise PdfDecodeError(f"Failed to extract PDF text. {e}.", cause=e) from e

        return [TextBlock(text=text)]
