"""Partners source: lenient filtering of the embedded exhibitor array.

Unlike speakers, the partner JSON mixes several object shapes (partners,
startups, sponsors, sessions...), so it is read as a generic tree and only
well-formed partner or startup objects are kept. Anything else is skipped.
"""

import json
import logging
from typing import Any, Optional

from vivatech_scraper.errors import ParseError
from vivatech_scraper.models import Partner
from vivatech_scraper.normalizers.country import country_from_city, country_from_name

logger = logging.getLogger(__name__)

STARTUP_TYPE = "startup"
PARTNER_TYPE_FRAGMENT = "partner"


def is_partner_type(type_str: str) -> bool:
    """Only partners (any tier) and startups are exported."""
    return PARTNER_TYPE_FRAGMENT in type_str or type_str == STARTUP_TYPE


def _string_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _nested_str(obj: dict, parent: str, key: str) -> Optional[str]:
    """Read obj[parent][key] if it is a string."""
    container = obj.get(parent)
    if not isinstance(container, dict):
        return None
    value = container.get(key)
    return value if isinstance(value, str) else None


def partner_from_object(obj: dict) -> Optional[Partner]:
    """Build a Partner from one JSON object, or None if it is not a partner."""
    name = obj.get("name")
    type_str = obj.get("type")
    if not isinstance(name, str) or not isinstance(type_str, str):
        return None
    if not is_partner_type(type_str):
        return None

    description = obj.get("desc")
    if description is None:
        description = obj.get("short_desc")

    city = _nested_str(obj, "key_figures", "city")
    if city is not None:
        country = country_from_city(city)
    else:
        country = country_from_name(name)

    return Partner(
        name=name,
        category=type_str,
        country=country,
        description=_string_or_empty(description),
        website=_string_or_empty(obj.get("website")),
        logo_url=_nested_str(obj, "logo", "u") or "",
    )


def partners_from_array(items: list) -> list[Partner]:
    """Filter and deduplicate partners from the top-level JSON array.

    The first object seen for a given name wins.
    """
    partners: list[Partner] = []
    seen_names: set[str] = set()

    for item in items:
        if not isinstance(item, dict):
            continue

        partner = partner_from_object(item)
        if partner is None:
            continue

        if partner.name in seen_names:
            logger.debug("Skipping duplicate partner: %s", partner.name)
            continue

        seen_names.add(partner.name)
        partners.append(partner)

    logger.info("Extracted %d partners from JSON array", len(partners))
    return partners


def parse_partners(json_text: str) -> list[Partner]:
    """Parse the recovered JSON text into Partner records.

    Raises:
        ParseError: the text is not valid JSON, not a JSON array, or holds
            strings that are not valid unicode.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse partner JSON: {e}") from e

    if not isinstance(data, list):
        raise ParseError(
            f"Expected a JSON array of partners, got {type(data).__name__}"
        )

    # json.loads accepts lone surrogate escapes (e.g. a truncated emoji)
    try:
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise ParseError(f"Partner JSON contains invalid unicode: {e}") from e

    return partners_from_array(data)
