"""CLI for the VivaTech scraper."""

from enum import Enum
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from vivatech_scraper import __version__
from vivatech_scraper.config import resolve_output, resolve_url
from vivatech_scraper.errors import ScraperError
from vivatech_scraper.log import setup_logging
from vivatech_scraper.pipeline import (
    print_partner_summary,
    print_speaker_summary,
    run_partners,
    run_speakers,
)

# Load environment variables (override=True to beat shell env vars)
load_dotenv(override=True)

app = typer.Typer(
    name="vivatech-scraper",
    help=(
        "🔍 Scrapes VivaTech conference data. Extracts speaker and partner data "
        "from the JSON embedded in the website and exports it to CSV."
    ),
    add_completion=False,
)
console = Console()


class ScrapeTarget(str, Enum):
    speakers = "speakers"
    partners = "partners"


def _version_callback(value: bool):
    if value:
        console.print(f"vivatech-scraper {__version__}")
        raise typer.Exit()


@app.command()
def scrape(
    target: ScrapeTarget = typer.Argument(
        ScrapeTarget.speakers, help="What to scrape: 'speakers' or 'partners'"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output CSV file path (defaults depend on target)"
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Increase log verbosity (-v info, -vv debug, -vvv trace)"
    ),
    url: Optional[str] = typer.Option(None, "--url", hidden=True, help="Override the target URL"),
    show_summary: bool = typer.Option(True, "--summary/--no-summary", help="Show preview table"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Scrape speakers or partners and write them to CSV."""
    setup_logging(verbose)

    console.print("[bold]🔍 VivaTech Scraper[/bold]")
    console.print("━━━━━━━━━━━━━━━━━━━")

    source_url = resolve_url(target.value, url)
    output_path = resolve_output(target.value, output)

    try:
        if target is ScrapeTarget.speakers:
            console.print("🎤 Scraping speakers...")
            records = run_speakers(source_url, output_path)
            if show_summary:
                print_speaker_summary(records)
        else:
            console.print("🤝 Scraping partners...")
            records = run_partners(source_url, output_path)
            if show_summary:
                print_partner_summary(records)
    except ScraperError as e:
        console.print(f"[red]Error during {e.step} step: {escape(str(e))}[/red]")
        if e.__cause__ is not None:
            console.print(f"[dim]Caused by: {escape(repr(e.__cause__))}[/dim]")
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
