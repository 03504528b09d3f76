"""
Email Scanning Module.

Finds email addresses in extracted text and writes them to disk.
"""

from email_extractor.scanning.emails import EMAIL_PATTERN, extract_emails
from email_extractor.scanning.writer import write_emails

__all__ = [
    "EMAIL_PATTERN",
    "extract_emails",
    "write_emails",
]
