"""Speakers source: strict parse of the embedded speaker array."""

import logging

from pydantic import TypeAdapter, ValidationError

from vivatech_scraper.errors import ParseError
from vivatech_scraper.models import Speaker

logger = logging.getLogger(__name__)

_SPEAKERS_ADAPTER = TypeAdapter(list[Speaker])


def parse_speakers(json_text: str) -> list[Speaker]:
    """Parse the recovered JSON text into Speaker records.

    All or nothing: one malformed speaker fails the whole batch.

    Raises:
        ParseError: invalid JSON or a record not matching the Speaker schema.
    """
    try:
        speakers = _SPEAKERS_ADAPTER.validate_json(json_text)
    except ValidationError as e:
        raise ParseError(
            f"Failed to parse JSON data into speakers ({e.error_count()} errors): {e}"
        ) from e

    logger.info("Successfully parsed %d speakers from JSON", len(speakers))
    return speakers
