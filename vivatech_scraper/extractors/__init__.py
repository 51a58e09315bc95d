"""Embedded-JSON extraction engine shared by the speakers and partners pipelines."""

from vivatech_scraper.extractors.embedded_json import (
    EmbeddedPayload,
    extract_json_array,
    locate_payload,
    unescape_sequences,
)

__all__ = [
    "EmbeddedPayload",
    "extract_json_array",
    "locate_payload",
    "unescape_sequences",
]
