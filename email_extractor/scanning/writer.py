"""
Email result writer.

Writes one address per line so the output can be fed to other tools.
"""

from pathlib import Path
from typing import Iterable


def write_emails(emails: Iterable[str], output_path: Path) -> Path:
    """
    Write email addresses to a plain text file.

    Addresses are written in sorted order, each followed by a newline.
    Parent directories are created when missing.

    Args:
        emails: Addresses to write.
        output_path: Destination file. It is overwritten.

    Returns:
        The resolved path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8", newline="\n") as f:
        for email in sorted(emails):
            f.write(f"{email}\n")

    return output_path.resolve()
