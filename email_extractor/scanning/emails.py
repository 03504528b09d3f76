"""
Lexical email address scanner.

See https://www.regular-expressions.info/email.html for a discussion of
how to find an email address. Matches are purely lexical; nothing is
checked for deliverability.
"""

import re
from typing import Iterable

from email_extractor.models import TextBlock

EMAIL_PATTERN = re.compile(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b")


def extract_emails(blocks: Iterable[TextBlock | str]) -> set[str]:
    """
    Collect every email address found in the given text.

    Args:
        blocks: Text blocks (or plain strings) to scan.

    Returns:
        The set of distinct addresses, which may be empty.
    """
    emails: set[str] = set()
    for block in blocks:
        text = block.text if isinstance(block, TextBlock) else block
        emails.update(EMAIL_PATTERN.findall(text))
    return emails
