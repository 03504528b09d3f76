"""
Zip archive extractor.

Many document formats are zip archives of XML parts (docx, xlsx, pptx,
odt, ods, odp). Their human-readable content lives in the ``.xml``
members, next to media and other binary parts that carry no text.
"""

import io
import logging
import zipfile
import zlib
from typing import ClassVar

from email_extractor.extractors.base import ArchiveOpenError, MemberReadError, TextExtractor
from email_extractor.models import FormatTag, TextBlock

logger = logging.getLogger(__name__)

XML_SUFFIX = ".xml"

# Errors zipfile raises while reading a damaged central directory
_OPEN_ERRORS: tuple[type[Exception], ...] = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    EOFError,
    OSError,
    NotImplementedError,
    ValueError,
)

# Errors zipfile raises for damaged or unsupported members
_MEMBER_ERRORS: tuple[type[Exception], ...] = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    OSError,
    RuntimeError,
    NotImplementedError,
    ValueError,
)


class ZipXmlExtractor(TextExtractor):
    """
    Extracts every member whose name ends in ``.xml``.

    Members are visited in archive order and each becomes one block.
    A single unreadable member aborts the whole extraction.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[FormatTag, ...]] = (FormatTag.ZIP_ARCHIVE,)

    def extract(self, buffer: bytes) -> list[TextBlock]:
        """
        Extract the XML members of a zip archive.

        Args:
            buffer: Raw archive bytes.

        Returns:
            One TextBlock per ``.xml`` member, in archive order.

        Raises:
            ArchiveOpenError: If the buffer is not a readable zip archive.
            MemberReadError: If an XML member cannot be read or is not UTF-8.
        """
        try:
            archive = zipfile.ZipFile(io.BytesIO(bytes(buffer)))
        except _OPEN_ERRORS as e:
            raise ArchiveOpenError(f"Failed to read ZIP archive. {e}.", cause=e) from e

        blocks: list[TextBlock] = []

        with archive:
            for info in archive.infolist():
                if not info.filename.endswith(XML_SUFFIX):
                    continue
                blocks.append(TextBlock(text=self._read_member(archive, info), origin=info.filename))

        logger.debug("Extracted %d XML members from archive", len(blocks))
        return blocks

    def _read_member(self, archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> str:
        """
        Read one member and decode it as strict UTF-8.

        Raises:
            MemberReadError: If the member is damaged, encrypted or not UTF-8.
        """
        try:
            data = archive.read(info)
        except _MEMBER_ERRORS as e:
            raise MemberReadError(info.filename, str(e), cause=e) from e

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MemberReadError(info.filename, "stream did not contain valid UTF-8", cause=e) from e
