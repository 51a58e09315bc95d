r"""Locate and recover a JSON array embedded as an escaped string in HTML.

Pages built with server-side hydration serialize their data as a string
literal inside a <script> tag, so the array shows up in the raw HTML as:

    [{\"id\":\"42\",\"firstname\":\"Ada\", ...}]

The end is found by counting brackets outside bare string literals, with an
escape flag that protects exactly one character after each backslash. Escaped
quotes never toggle string state, so brackets inside escaped values are
counted and must balance on their own.
"""

import logging
import string

from pydantic import BaseModel, Field

from vivatech_scraper.config import PAYLOAD_MARKER
from vivatech_scraper.errors import NotFoundError
from vivatech_scraper.log import TRACE

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)

SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


class EmbeddedPayload(BaseModel):
    """Escaped JSON array literal located inside a page."""

    start: int = Field(description="Offset of the marker in the page")
    end: int = Field(description="Offset of the closing bracket (inclusive)")
    raw: str = Field(description="Page slice [start, end], still escaped")


def locate_payload(html: str, marker: str = PAYLOAD_MARKER) -> EmbeddedPayload:
    """Find the exact bounds of the escaped array starting at `marker`.

    Raises:
        NotFoundError: marker missing, or brackets never balance.
    """
    start = html.find(marker)
    if start == -1:
        raise NotFoundError("Could not find embedded JSON marker in the HTML content")

    logger.debug("Found JSON marker at offset %d", start)

    depth = 0
    in_string = False
    escape_next = False

    for i in range(start, len(html)):
        ch = html[i]

        if escape_next:
            escape_next = False
            continue

        if ch == "\\":
            escape_next = True
        elif ch == '"':
            in_string = not in_string
        elif ch == "[" and not in_string:
            depth += 1
        elif ch == "]" and not in_string:
            # Unmatched closers may push depth below zero; only 0 ends the scan
            depth -= 1
            if depth == 0:
                logger.debug("JSON array spans offsets %d-%d", start, i)
                return EmbeddedPayload(start=start, end=i, raw=html[start:i + 1])

    raise NotFoundError(
        f"Embedded JSON starting at offset {start} is never closed "
        f"(bracket depth {depth} at end of input)"
    )


def unescape_sequences(text: str) -> str:
    """Resolve backslash escapes left in the payload.

    `\\uXXXX` becomes its code point (left untouched when the digits are not
    hex or encode a surrogate), `\\n`, `\\r`, `\\t`, `\\"` and `\\\\` become
    their characters. Unknown escapes keep their backslash, and a trailing
    lone backslash is kept as is.
    """
    result = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        i += 1

        if ch != "\\":
            result.append(ch)
            continue

        if i >= n:
            result.append(ch)
            break

        nxt = text[i]
        i += 1

        if nxt == "u":
            hex_chars = text[i:i + 4]
            i += len(hex_chars)
            if len(hex_chars) == 4 and all(c in HEX_DIGITS for c in hex_chars):
                code_point = int(hex_chars, 16)
                if not 0xD800 <= code_point <= 0xDFFF:
                    result.append(chr(code_point))
                    continue
            result.append("\\u" + hex_chars)
        elif nxt in SIMPLE_ESCAPES:
            result.append(SIMPLE_ESCAPES[nxt])
        else:
            result.append("\\" + nxt)

    return "".join(result)


def extract_json_array(html: str, marker: str = PAYLOAD_MARKER) -> str:
    """Extract the embedded JSON array from a page as plain JSON text.

    Raises:
        NotFoundError: no delimited array found.
    """
    payload = locate_payload(html, marker)

    unquoted = payload.raw.replace('\\"', '"')
    json_text = unescape_sequences(unquoted)

    logger.info("Extracted %d characters of embedded JSON", len(json_text))
    logger.log(TRACE, "Embedded JSON head: %s", json_text[:500])
    return json_text
