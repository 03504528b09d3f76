"""
File scanning pipeline.

Loads a file into memory, runs format detection and extraction on the
buffer, and scans the extracted text for email addresses. This is the
only layer that touches the filesystem on the input side.
"""

import logging
from pathlib import Path

from email_extractor.config import Settings, get_settings
from email_extractor.extractors import ErrorKind, ExtractionError, extract_buffer
from email_extractor.models import ScanResult
from email_extractor.scanning import extract_emails

logger = logging.getLogger(__name__)


class FileLoadError(ExtractionError):
    """Raised when the input file cannot be loaded into memory."""

    kind = ErrorKind.FILE_LOAD

    def __init__(self, message: str, file_path: str | Path, cause: Exception | None = None):
        self.file_path = str(file_path)
        super().__init__(f"Failed to load '{file_path}': {message}", cause=cause)


def load_buffer(file_path: Path, max_bytes: int) -> bytes:
    """
    Read a whole file into memory.

    Args:
        file_path: File to read.
        max_bytes: Largest accepted file size.

    Returns:
        The file contents.

    Raises:
        FileLoadError: If the file is missing, not a regular file,
            too large or unreadable.
    """
    if not file_path.exists():
        raise FileLoadError("File does not exist", file_path)

    if not file_path.is_file():
        raise FileLoadError("Path is not a file", file_path)

    try:
        size = file_path.stat().st_size
        if size > max_bytes:
            raise FileLoadError(f"File is {size} bytes, larger than the {max_bytes} byte limit", file_path)
        return file_path.read_bytes()
    except OSError as e:
        raise FileLoadError(str(e), file_path, cause=e) from e


def scan_file(file_path: Path | str, settings: Settings | None = None) -> ScanResult:
    """
    Extract all email addresses from a file.

    Args:
        file_path: File to scan.
        settings: Settings to use. Defaults to the cached settings.

    Returns:
        ScanResult with the unique addresses found.

    Raises:
        ExtractionError: If the file cannot be loaded or its text cannot be extracted.
    """
    settings = settings or get_settings()
    path = Path(file_path) if isinstance(file_path, str) else file_path

    buffer = load_buffer(path, settings.max_file_size_bytes)
    logger.info("File path: %s.", path)
    logger.info("File size: %d bytes.", len(buffer))

    document = extract_buffer(buffer, source_path=str(path))
    logger.info("Detected format: %s (%s).", document.signature, document.format.value)
    logger.info("File processed successfully.")

    emails = extract_emails(document.blocks)

    return ScanResult(
        source_path=str(path),
        byte_size=document.byte_size,
        format=document.format,
        signature=document.signature,
        block_count=document.block_count,
        emails=tuple(sorted(emails)),
    )
