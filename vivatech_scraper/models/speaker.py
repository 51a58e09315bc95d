"""Speaker model matching the JSON embedded in the speakers page."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SpeakerImage(BaseModel):
    """Speaker photo in its four published sizes."""

    model_config = ConfigDict(strict=True, extra="ignore")

    s: str = Field(default="", description="Small")
    t: str = Field(default="", description="Thumbnail")
    l: str = Field(default="", description="Large")  # noqa: E741
    u: str = Field(description="Main (original upload)")


class Speaker(BaseModel):
    """A conference speaker as published by the site.

    Validation is strict: a field with the wrong JSON type rejects the
    record, and with it the whole batch.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    # ===== IDENTITY =====
    id: str
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    job_title: str = Field(default="", alias="jobTitle")
    company: str = ""

    # ===== TAXONOMY =====
    tags: list[str] = Field(default_factory=list)
    themes: list[str] = Field(default_factory=list)

    image: Optional[SpeakerImage] = None

    # ===== FLAGS =====
    has_bio: bool = Field(default=False, alias="hasBio")
    has_sessions: bool = Field(default=False, alias="hasSessions")
    is_official: bool = Field(default=False, alias="isOfficial")
    is_partner: bool = Field(default=False, alias="isPartner")
    top: bool = Field(default=False, description="Featured as a top speaker")

    communication_manager: Optional[str] = None


class SpeakerRecord(BaseModel):
    """Flat CSV row for a speaker. Absent optional data is "N/A"."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    first_name: str = Field(alias="FirstName")
    last_name: str = Field(alias="LastName")
    email: str = Field(alias="Email")
    job_title: str = Field(alias="JobTitle")
    company: str = Field(alias="Company")
    tags: str = Field(alias="Tags")
    themes: str = Field(alias="Themes")
    has_bio: bool = Field(alias="HasBio")
    has_sessions: bool = Field(alias="HasSessions")
    is_official: bool = Field(alias="IsOfficial")
    is_partner: bool = Field(alias="IsPartner")
    is_top_speaker: bool = Field(alias="IsTopSpeaker")
    communication_manager: str = Field(alias="CommunicationManager")
    image_small_url: str = Field(alias="ImageSmallURL")
    image_thumbnail_url: str = Field(alias="ImageThumbnailURL")
    image_large_url: str = Field(alias="ImageLargeURL")
    image_main_url: str = Field(alias="ImageMainURL")


SPEAKER_COLUMNS = [field.alias for field in SpeakerRecord.model_fields.values()]

NOT_AVAILABLE = "N/A"


def speaker_to_record(speaker: Speaker) -> SpeakerRecord:
    """Flatten a Speaker into its CSV row."""
    if speaker.image is None:
        small = thumbnail = large = main = NOT_AVAILABLE
    else:
        small, thumbnail, large, main = (
            speaker.image.s,
            speaker.image.t,
            speaker.image.l,
            speaker.image.u,
        )

    return SpeakerRecord(
        id=speaker.id,
        first_name=speaker.firstname,
        last_name=speaker.lastname,
        email=speaker.email,
        job_title=speaker.job_title,
        company=speaker.company,
        tags=", ".join(speaker.tags),
        themes=", ".join(speaker.themes),
        has_bio=speaker.has_bio,
        has_sessions=speaker.has_sessions,
        is_official=speaker.is_official,
        is_partner=speaker.is_partner,
        is_top_speaker=speaker.top,
        communication_manager=(
            speaker.communication_manager
            if speaker.communication_manager is not None
            else NOT_AVAILABLE
        ),
        image_small_url=small,
        image_thumbnail_url=thumbnail,
        image_large_url=large,
        image_main_url=main,
    )
