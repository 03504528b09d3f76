"""
Email Extractor - pull email addresses out of arbitrary files.

This package identifies a file's format from its binary signature,
extracts the human-readable text it carries (plain text, PDF text,
or the XML parts of zip-based office documents) and scans that text
for email addresses.
"""

__version__ = "1.0.1"
