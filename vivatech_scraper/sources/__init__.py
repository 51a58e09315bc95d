"""Per-page parsers turning recovered JSON into typed records."""

from vivatech_scraper.sources.speakers import parse_speakers
from vivatech_scraper.sources.partners import parse_partners

__all__ = ["parse_speakers", "parse_partners"]
