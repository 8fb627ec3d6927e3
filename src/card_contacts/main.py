"""CLI entry point for the business card contact parser."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from card_contacts.batch import BatchProcessor
from card_contacts.config import ExtractorConfig, load_config
from card_contacts.extractor.heuristic import HeuristicExtractor
from card_contacts.models.contact import ParsedCard
from card_contacts.parser import ContactCardParser

app = typer.Typer(
    name="cardcontacts",
    help="Extract contact records from business card OCR text.",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
):
    """Extract contact records from business card OCR text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def parse(
    text_path: Annotated[
        Path | None,
        typer.Argument(
            help="OCR text file (reads stdin when omitted)",
            exists=True,
            readable=True,
            dir_okay=False,
        ),
    ] = None,
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output raw JSON instead of formatted output",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="JSON file with keyword vocabularies",
        ),
    ] = None,
    linkedin: Annotated[
        bool,
        typer.Option(
            "--linkedin",
            help="Add a LinkedIn people search URL",
        ),
    ] = False,
    llm_response: Annotated[
        bool,
        typer.Option(
            "--llm-response",
            help="Input is a vision LLM's JSON reply, not OCR text",
        ),
    ] = False,
):
    """Parse one card's OCR text and print the contact record."""
    try:
        text = text_path.read_text(encoding="utf-8") if text_path else sys.stdin.read()
        parser = _create_parser(config_path, linkedin)

        if llm_response:
            card = parser.parse_response(text)
        else:
            card = parser.parse_text(text)

        if output_json:
            print(card.model_dump_json(by_alias=True, indent=2))
        else:
            _print_formatted(card)

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _create_parser(config_path: Path | None, linkedin: bool) -> ContactCardParser:
    """Create a parser backed by the heuristic extractor."""
    config = load_config(config_path) if config_path else ExtractorConfig()
    return ContactCardParser(
        extractor=HeuristicExtractor(config), linkedin_lookup=linkedin
    )


def _print_formatted(card: ParsedCard):
    """Print formatted contact info."""
    contact = card.contact
    console.print()

    if contact.full_name:
        console.print(f"[bold cyan]{contact.full_name}[/bold cyan]")
    if contact.organization_title:
        console.print(f"[dim]{contact.organization_title}[/dim]")
    if contact.organization_name:
        console.print(f"[green]{contact.organization_name}[/green]")

    console.print()

    rows = [
        (f"Email ({contact.email_type})", contact.email_value),
        (f"Phone ({contact.phone_type})", contact.phone_value),
        ("Website", contact.website_value),
        ("Address", contact.address_formatted),
        ("LinkedIn", card.linkedin_url),
    ]
    rows = [(label, value) for label, value in rows if value]

    if rows:
        table = Table(show_header=False, box=None)
        table.add_column("Type", style="dim")
        table.add_column("Value")
        for label, value in rows:
            table.add_row(label, value)
        console.print(table)
    elif contact.is_empty():
        console.print("[yellow]No contact fields recognized.[/yellow]")

    if card.metadata:
        console.print()
        console.print(
            f"[dim]Processed in {card.metadata.processing_time_ms:.1f}ms "
            f"(Extractor: {card.metadata.extractor_backend})[/dim]"
        )

    console.print()


@app.command()
def batch(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="OCR text files or directories to process",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (JSON or CSV)",
        ),
    ],
    format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format: json or csv (Google Contacts import)",
        ),
    ] = "json",
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="JSON file with keyword vocabularies",
        ),
    ] = None,
    linkedin: Annotated[
        bool,
        typer.Option(
            "--linkedin",
            help="Add LinkedIn people search URLs (JSON output only)",
        ),
    ] = False,
):
    """Process multiple OCR text files."""
    format = format.lower()
    if format not in ("json", "csv"):
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Use 'json' or 'csv'.")
        raise typer.Exit(1)

    try:
        parser = _create_parser(config_path, linkedin)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    processor = BatchProcessor(parser)
    paths = processor.collect_inputs(inputs)

    if not paths:
        console.print("[yellow]Warning:[/yellow] No text files found to process.")
        raise typer.Exit(0)

    console.print(f"Processing {len(paths)} file(s)...")

    result = processor.process(paths)

    if format == "csv":
        content = processor.to_csv(result)
    else:
        content = processor.to_json(result)

    output.write_text(content, encoding="utf-8")

    console.print(
        f"[green]Done:[/green] {result.succeeded} succeeded, "
        f"{result.failed} failed, {result.total_time_ms:.1f}ms total"
    )
    for error in result.errors:
        console.print(f"[red]Failed:[/red] {error['source_path']}: {error['error']}")
    console.print(f"Output: {output}")


@app.command()
def version():
    """Show version information."""
    from card_contacts import __version__

    console.print(f"cardcontacts version {__version__}")


if __name__ == "__main__":
    app()
