"""
Email Extractor CLI Application.

Provides a command-line interface for extracting email addresses from
a single file of any supported format.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from email_extractor.config import get_settings
from email_extractor.detection import identify
from email_extractor.extractors import ExtractionError
from email_extractor.logging_setup import setup_logging
from email_extractor.models import ScanResult
from email_extractor.pipeline import load_buffer, scan_file
from email_extractor.scanning import write_emails

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="email-extractor",
    help="Extract email addresses from text, PDF and office documents",
    add_completion=False,
)

console = Console()


@app.command()
def scan(
    input_file: Annotated[Path, typer.Argument(help="Path to the file to scan")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="File to write the email addresses to"),
    ] = None,
    print_emails: Annotated[
        bool,
        typer.Option("--print", help="Also print the addresses to the console"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed output"),
    ] = False,
) -> None:
    """
    Extract email addresses from a file.

    The file format is detected from its content, not its extension.
    Unique addresses are written one per line to the output file.
    """
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    try:
        result = scan_file(input_file, settings)
    except ExtractionError as e:
        logger.error("Application error: %s.", e)
        console.print(f"[red]Extraction Error:[/red] {e}")
        raise typer.Exit(1)

    if verbose:
        _display_result(result)

    if not result.emails:
        logger.warning("No email address found.")
        return

    output_path = output or settings.output_path
    try:
        saved_path = write_emails(result.emails, output_path)
        logger.info("Extracted emails written to %s successfully.", saved_path)
    except OSError as e:
        logger.error("Failed to write emails to file. %s.", e)

    if print_emails:
        for email in result.emails:
            console.print(email, highlight=False)


@app.command()
def detect(
    input_file: Annotated[Path, typer.Argument(help="Path to the file to inspect")],
) -> None:
    """
    Show the detected format of a file without extracting it.
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        buffer = load_buffer(input_file, settings.max_file_size_bytes)
    except ExtractionError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    match = identify(buffer)
    console.print(f"{input_file}: {match.name} ({match.tag.value})", highlight=False, soft_wrap=True)


def _display_result(result: ScanResult) -> None:
    """Display a scan summary."""
    table = Table(title="Scan Summary")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("File", result.source_path)
    table.add_row("Size", f"{result.byte_size} bytes")
    table.add_row("Format", f"{result.signature} ({result.format.value})")
    table.add_row("Text blocks", str(result.block_count))
    table.add_row("Email addresses", str(result.email_count))

    console.print(table)

    if result.emails:
        console.print(Panel("\n".join(result.emails), title="Email Addresses"))


if __name__ == "__main__":
    app()
