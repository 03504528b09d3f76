"""
Pytest configuration and fixtures.

Provides common test fixtures for all test modules. Every binary sample
is built in memory so the tests need no checked-in fixture files.
"""

import io
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Generator

import fitz  # PyMuPDF
import pytest

from email_extractor.config import Settings


def build_zip(members: list[tuple[str, bytes]], compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """Build a zip archive with the given members, in order."""
    stream = io.BytesIO()
    with zipfile.ZipFile(stream, "w", compression=compression) as archive:
        for name, data in members:
            archive.writestr(name, data)
    return stream.getvalue()


def build_pdf(text: str) -> bytes:
    """Build a one-page PDF containing the given text."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# Builder Fixtures
# ==============================================================================


@pytest.fixture
def zip_builder() -> Callable[..., bytes]:
    """Return the in-memory zip archive builder."""
    return build_zip


@pytest.fixture
def pdf_builder() -> Callable[[str], bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


# ==============================================================================
# Sample Text Fixtures
# ==============================================================================


@pytest.fixture
def sample_text() -> str:
    """Sample plain text with repeated addresses."""
    return (
        "Quarterly contacts\n"
        "contact: a@b.com, again a@b.com, plus c@d.org\n"
        "Support lives at support@example.co.uk\r\n"
        "No address on this line\n"
    )


@pytest.fixture
def sample_text_emails() -> set[str]:
    """The distinct addresses in ``sample_text``."""
    return {"a@b.com", "c@d.org", "support@example.co.uk"}


# ==============================================================================
# Binary Buffer Fixtures
# ==============================================================================


@pytest.fixture
def docx_bytes() -> bytes:
    """Minimal docx-like package with an XML body and a media part."""
    return build_zip(
        [
            ("[Content_Types].xml", b'<?xml version="1.0"?><Types/>'),
            ("_rels/.rels", b'<?xml version="1.0"?><Relationships/>'),
            ("word/document.xml", b"<w:document><w:t>Mail jane.doe@corp.example</w:t></w:document>"),
            ("word/media/image1.png", b"\x89PNG\r\n\x1a\nnot-an-email@skip.me"),
        ]
    )


@pytest.fixture
def odt_bytes() -> bytes:
    """Minimal OpenDocument text package with the stored mimetype first."""
    stream = io.BytesIO()
    with zipfile.ZipFile(stream, "w") as archive:
        archive.writestr(
            zipfile.ZipInfo("mimetype"),
            b"application/vnd.oasis.opendocument.text",
            compress_type=zipfile.ZIP_STORED,
        )
        archive.writestr(
            "content.xml",
            b"<office:text>Reach odt.user@office.org</office:text>",
            compress_type=zipfile.ZIP_DEFLATED,
        )
    return stream.getvalue()


@pytest.fixture
def mixed_zip_bytes() -> bytes:
    """Generic zip with members a.xml, b.bin, c.xml."""
    return build_zip(
        [
            ("a.xml", b"<a>first@one.com</a>"),
            ("b.bin", b"\x00\x01binary@hidden.net"),
            ("c.xml", b"<c>second@two.org</c>"),
        ]
    )


@pytest.fixture
def pdf_bytes() -> bytes:
    """One-page PDF with an address in its text layer."""
    return build_pdf("Write to pdf.person@example.com for details")


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Buffer starting with a JPEG/JFIF magic number."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01" + b"\x00" * 64


# ==============================================================================
# File Fixtures
# ==============================================================================


@pytest.fixture
def sample_txt_file(temp_dir: Path, sample_text: str) -> Path:
    """Create a sample text file."""
    file_path = temp_dir / "contacts.txt"
    file_path.write_text(sample_text, encoding="utf-8", newline="")
    return file_path


@pytest.fixture
def docx_file(temp_dir: Path, docx_bytes: bytes) -> Path:
    """Write the docx sample under a misleading extension."""
    file_path = temp_dir / "report.dat"
    file_path.write_bytes(docx_bytes)
    return file_path


@pytest.fixture
def empty_file(temp_dir: Path) -> Path:
    """Create an empty file."""
    file_path = temp_dir / "empty.txt"
    file_path.write_bytes(b"")
    return file_path


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings that write into the temporary directory."""
    return Settings(
        output_path=temp_dir / "out" / "emails.txt",
        max_file_size_mb=1.0,
        log_level="DEBUG",
    )
