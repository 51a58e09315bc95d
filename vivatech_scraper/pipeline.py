"""Main pipeline orchestration: fetch → extract → parse → export."""

import logging
from pathlib import Path
from typing import Optional, Union

import httpx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vivatech_scraper.config import DEBUG_HTML_FILE, PAYLOAD_MARKER
from vivatech_scraper.errors import ExportError, NotFoundError
from vivatech_scraper.export import write_csv
from vivatech_scraper.extractors import extract_json_array
from vivatech_scraper.fetch import fetch_page
from vivatech_scraper.models import (
    PARTNER_COLUMNS,
    SPEAKER_COLUMNS,
    Partner,
    PartnerRecord,
    Speaker,
    SpeakerRecord,
    partner_to_record,
    speaker_to_record,
)
from vivatech_scraper.sources import parse_partners, parse_speakers

logger = logging.getLogger(__name__)
console = Console()


def save_debug_html(html: str, filepath: Union[str, Path] = DEBUG_HTML_FILE) -> Path:
    """Dump the fetched page so markup changes can be inspected."""
    filepath = Path(filepath)
    try:
        filepath.write_text(html, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write debug HTML file {filepath}: {e}") from e

    logger.info("Saved debug HTML to: %s", filepath)
    console.print(f"💾 Debug HTML saved to: {filepath}")
    return filepath


def extract_or_dump(html: str, debug_path: Union[str, Path] = DEBUG_HTML_FILE) -> str:
    """Extract the embedded JSON, dumping the page first if it is missing."""
    try:
        return extract_json_array(html, PAYLOAD_MARKER)
    except NotFoundError:
        save_debug_html(html, debug_path)
        raise


def to_speaker_records(speakers: list[Speaker]) -> list[SpeakerRecord]:
    return [speaker_to_record(s) for s in speakers]


def to_partner_records(partners: list[Partner]) -> list[PartnerRecord]:
    return [partner_to_record(p) for p in partners]


def run_speakers(
    url: str,
    output_path: Union[str, Path],
    client: Optional[httpx.Client] = None,
    debug_path: Union[str, Path] = DEBUG_HTML_FILE,
) -> list[SpeakerRecord]:
    """Scrape speakers from `url` into a CSV file.

    Returns:
        The records written, in page order.
    """
    console.print("🌐 Fetching webpage content...")
    html = fetch_page(url, client=client)

    console.print("🔍 Extracting speaker data from HTML...")
    json_text = extract_or_dump(html, debug_path)

    console.print("📊 Parsing JSON data...")
    speakers = parse_speakers(json_text)
    console.print(f"[green]✅ Found {len(speakers)} speakers[/green]")

    records = to_speaker_records(speakers)

    console.print("💾 Writing data to CSV file...")
    write_csv(records, output_path, SPEAKER_COLUMNS)

    console.print(f"[bold green]✨ Successfully saved speaker data to: {output_path}[/bold green]")
    return records


def run_partners(
    url: str,
    output_path: Union[str, Path],
    client: Optional[httpx.Client] = None,
    debug_path: Union[str, Path] = DEBUG_HTML_FILE,
) -> list[PartnerRecord]:
    """Scrape partners and startups from `url` into a CSV file.

    Returns:
        The records written, deduplicated by company name.
    """
    console.print("🌐 Fetching webpage content...")
    html = fetch_page(url, client=client)

    console.print("🔍 Extracting partner data from HTML...")
    json_text = extract_or_dump(html, debug_path)

    console.print("📊 Filtering partner data...")
    partners = parse_partners(json_text)
    console.print(f"[green]✅ Found {len(partners)} partners[/green]")

    records = to_partner_records(partners)

    console.print("💾 Writing data to CSV file...")
    write_csv(records, output_path, PARTNER_COLUMNS)

    console.print(f"[bold green]✨ Successfully saved partner data to: {output_path}[/bold green]")
    return records


def print_speaker_summary(records: list[SpeakerRecord], limit: int = 10) -> None:
    """Print a preview table of exported speakers."""
    table = Table(title=f"Speakers (showing {min(len(records), limit)} of {len(records)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan", max_width=30)
    table.add_column("Job Title", style="green", max_width=30)
    table.add_column("Company", style="yellow", max_width=25)
    table.add_column("Top", style="magenta", justify="center")

    for record in records[:limit]:
        table.add_row(
            escape(record.id),
            escape(f"{record.first_name} {record.last_name}".strip()),
            escape(record.job_title or "-"),
            escape(record.company or "-"),
            "★" if record.is_top_speaker else "",
        )

    console.print(table)


def print_partner_summary(records: list[PartnerRecord], limit: int = 10) -> None:
    """Print a preview table of exported partners."""
    table = Table(title=f"Partners (showing {min(len(records), limit)} of {len(records)})")
    table.add_column("Company", style="cyan", max_width=30)
    table.add_column("Category", style="yellow")
    table.add_column("Country", style="green")
    table.add_column("Website", style="blue", max_width=35)

    for record in records[:limit]:
        table.add_row(
            escape(record.company_name),
            escape(record.category),
            record.country or "?",
            escape(record.website or "-"),
        )

    console.print(table)
