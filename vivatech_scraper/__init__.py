"""VivaTech conference scraper: embedded JSON to CSV."""

__version__ = "0.1.0"
