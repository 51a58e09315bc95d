"""Data models for the scraper."""

from vivatech_scraper.models.speaker import (
    SPEAKER_COLUMNS,
    Speaker,
    SpeakerImage,
    SpeakerRecord,
    speaker_to_record,
)
from vivatech_scraper.models.partner import (
    PARTNER_COLUMNS,
    Partner,
    PartnerRecord,
    partner_to_record,
)

__all__ = [
    "Speaker",
    "SpeakerImage",
    "SpeakerRecord",
    "SPEAKER_COLUMNS",
    "speaker_to_record",
    "Partner",
    "PartnerRecord",
    "PARTNER_COLUMNS",
    "partner_to_record",
]
