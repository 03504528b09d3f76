"""
Binary signature predicates.

Each predicate inspects a bounded prefix of a buffer and answers whether a
given signature is present. Predicates only slice the buffer, so empty and
truncated input simply fails to match.

See https://en.wikipedia.org/wiki/List_of_file_signatures.
"""

ZIP_LOCAL_HEADER = b"PK\x03\x04"
ZIP_EMPTY_ARCHIVE = b"PK\x05\x06"
ZIP_SPANNED_ARCHIVE = b"PK\x07\x08"
PDF_MAGIC = b"%PDF"
UTF8_BOM = b"\xef\xbb\xbf"

# How far into an archive the office markers are searched for.
OFFICE_SCAN_LIMIT = 8192

OOXML_MARKERS: tuple[bytes, ...] = (b"[Content_Types].xml", b"_rels/.rels", b"docProps")

ODF_MIMETYPE_OFFSET = 30
ODF_MIMETYPE_VALUE_OFFSET = 38
ODF_MIMETYPE_PREFIX = b"application/vnd.oasis.opendocument."


def is_zip(buffer: bytes) -> bool:
    """Local header, empty-archive or spanned-archive zip magic."""
    head = buffer[:4]
    return head in (ZIP_LOCAL_HEADER, ZIP_EMPTY_ARCHIVE, ZIP_SPANNED_ARCHIVE)


def _is_ooxml(buffer: bytes, part_directory: bytes) -> bool:
    if not buffer.startswith(ZIP_LOCAL_HEADER):
        return False
    window = buffer[:OFFICE_SCAN_LIMIT]
    if not any(marker in window for marker in OOXML_MARKERS):
        return False
    return part_directory in window


def is_docx(buffer: bytes) -> bool:
    return _is_ooxml(buffer, b"word/")


def is_pptx(buffer: bytes) -> bool:
    return _is_ooxml(buffer, b"ppt/")


def is_xlsx(buffer: bytes) -> bool:
    return _is_ooxml(buffer, b"xl/")


def _is_open_document(buffer: bytes, kind: bytes) -> bool:
    """
    OpenDocument packages store an uncompressed ``mimetype`` member first,
    so its name and value sit at fixed offsets after the local header.
    """
    if not buffer.startswith(ZIP_LOCAL_HEADER):
        return False
    name_end = ODF_MIMETYPE_OFFSET + len(b"mimetype")
    if buffer[ODF_MIMETYPE_OFFSET:name_end] != b"mimetype":
        return False
    expected = ODF_MIMETYPE_PREFIX + kind
    return buffer[ODF_MIMETYPE_VALUE_OFFSET : ODF_MIMETYPE_VALUE_OFFSET + len(expected)] == expected


def is_odt(buffer: bytes) -> bool:
    return _is_open_document(buffer, b"text")


def is_ods(buffer: bytes) -> bool:
    return _is_open_document(buffer, b"spreadsheet")


def is_odp(buffer: bytes) -> bool:
    return _is_open_document(buffer, b"presentation")


def is_pdf(buffer: bytes) -> bool:
    return buffer.startswith(PDF_MAGIC)


def _text_head(buffer: bytes, size: int = 256) -> bytes:
    head = buffer[:size]
    if head.startswith(UTF8_BOM):
        head = head[len(UTF8_BOM) :]
    return head.lstrip()


def is_xml(buffer: bytes) -> bool:
    return _text_head(buffer).startswith(b"<?xml")


def is_html(buffer: bytes) -> bool:
    head = _text_head(buffer).lower()
    return head.startswith(b"<!doctype html") or head.startswith(b"<html")
