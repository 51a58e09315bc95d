"""Process-wide settings. Nothing in here is mutated at runtime."""

import os
from typing import Optional

SPEAKERS_URL = "https://vivatechnology.com/speakers"
PARTNERS_URL = "https://vivatechnology.com/partners"

DEFAULT_SPEAKERS_OUTPUT = "vivatech_speakers_2025_extended.csv"
DEFAULT_PARTNERS_OUTPUT = "vivatech_partners_2025.csv"

# Raw page is dumped here when extraction fails
DEBUG_HTML_FILE = "debug_vivatech_page.html"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# Escaped prefix of a JSON array of objects whose first key is "id"
PAYLOAD_MARKER = r'[{\"id\":\"'

# Optional source overrides, read from the environment (or .env)
SPEAKERS_URL_ENV = "VIVATECH_SPEAKERS_URL"
PARTNERS_URL_ENV = "VIVATECH_PARTNERS_URL"

DEFAULT_URLS = {
    "speakers": SPEAKERS_URL,
    "partners": PARTNERS_URL,
}
DEFAULT_OUTPUTS = {
    "speakers": DEFAULT_SPEAKERS_OUTPUT,
    "partners": DEFAULT_PARTNERS_OUTPUT,
}
URL_ENV_VARS = {
    "speakers": SPEAKERS_URL_ENV,
    "partners": PARTNERS_URL_ENV,
}


def resolve_url(target: str, override: Optional[str] = None) -> str:
    """Pick the source URL: explicit override, then env var, then default."""
    if override:
        return override
    return os.environ.get(URL_ENV_VARS[target]) or DEFAULT_URLS[target]


def resolve_output(target: str, override: Optional[str] = None) -> str:
    """Pick the output CSV path for a target."""
    return override or DEFAULT_OUTPUTS[target]
