"""Error taxonomy for the scraper pipeline.

Every failure is fatal: the pipeline stops at the first one and the CLI
reports which step failed along with the underlying cause.
"""


class ScraperError(Exception):
    """Base class for all pipeline failures."""

    step = "scrape"


class FetchError(ScraperError):
    """Network failure or non-2xx status."""

    step = "fetch"


class NotFoundError(ScraperError):
    """No embedded JSON array could be located in the page."""

    step = "extract"


class ParseError(ScraperError):
    """Recovered JSON is invalid or does not match the expected schema."""

    step = "parse"


class ExportError(ScraperError):
    """The CSV file could not be created or written."""

    step = "export"
