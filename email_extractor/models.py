"""
Pydantic models for the Email Extractor.

These models define the schemas for:
- The closed set of format tags produced by signature detection
- Text blocks produced by the extraction strategies
- Extracted documents and scan results handed to callers

All models are frozen so results cannot be altered after creation.
"""

from enum import Enum
from hashlib import sha256

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ==============================================================================
# Format Models
# ==============================================================================


class FormatTag(str, Enum):
    """Container format of a byte buffer, as decided by its signature."""

    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    ZIP_ARCHIVE = "zip_archive"  # docx, xlsx, pptx, odt, ods, odp and plain zip
    UNSUPPORTED = "unsupported"


class SignatureMatch(BaseModel):
    """
    The named signature that classified a buffer.

    ``name`` is a short format name such as ``docx``, ``pdf`` or ``text``;
    for unsupported binaries it is the extension the signature is known by.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Short name of the matched signature")
    tag: FormatTag = Field(..., description="Format tag the signature maps to")


# ==============================================================================
# Extraction Models
# ==============================================================================


class TextBlock(BaseModel):
    """
    One unit of extracted text.

    A block is a decoded line of a plain-text file, the whole text of a PDF,
    or the decoded contents of one archive member.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Extracted text")

    origin: str | None = Field(
        default=None,
        description="Archive member the text came from, if any",
    )


class ExtractedDocument(BaseModel):
    """
    Result of classifying and extracting a whole buffer.

    Contains the text blocks in source order and metadata about the source.
    """

    model_config = ConfigDict(frozen=True)

    format: FormatTag = Field(..., description="Detected format tag")

    signature: str = Field(..., description="Name of the matched signature")

    byte_size: int = Field(..., ge=0, description="Size of the source buffer in bytes")

    source_path: str | None = Field(
        default=None,
        description="Path to the source document, when it came from a file",
    )

    blocks: tuple[TextBlock, ...] = Field(
        default=(),
        description="Extracted text blocks in source order",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def block_count(self) -> int:
        """Number of extracted text blocks."""
        return len(self.blocks)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def character_count(self) -> int:
        """Total number of characters across all blocks."""
        return sum(len(block.text) for block in self.blocks)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def content_hash(self) -> str:
        """SHA-256 hex digest of the block texts joined by newlines."""
        content = "\n".join(block.text for block in self.blocks)
        return sha256(content.encode("utf-8")).hexdigest()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_empty(self) -> bool:
        """Check if the extracted content is empty or whitespace-only."""
        return all(not block.text.strip() for block in self.blocks)


# ==============================================================================
# Scan Models
# ==============================================================================


class ScanResult(BaseModel):
    """
    Outcome of scanning one file for email addresses.

    ``emails`` holds each address once, sorted for stable output.
    """

    model_config = ConfigDict(frozen=True)

    source_path: str = Field(..., description="Path of the scanned file")

    byte_size: int = Field(..., ge=0, description="Size of the scanned file in bytes")

    format: FormatTag = Field(..., description="Detected format tag")

    signature: str = Field(..., description="Name of the matched signature")

    block_count: int = Field(..., ge=0, description="Number of text blocks scanned")

    emails: tuple[str, ...] = Field(
        default=(),
        description="Unique email addresses found, sorted",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def email_count(self) -> int:
        """Number of unique email addresses found."""
        return len(self.emails)
