"""Strip HTML from card fields and decode character references."""

import html
import logging
import re
from html.entities import html5

from card_text.constants import (
    IMG_FILENAME_REPLACEMENT,
    MALFORMED_ENTITY_PLACEHOLDER,
    MAX_CODEPOINT,
    SPEECH_TAG_SEPARATOR,
)
from card_text.patterns import ENTITY_RE, HTML_RE, IMG_TAG_RE

logger = logging.getLogger(__name__)


def replace_all(pattern: re.Pattern, repl, text: str) -> str:
    """Substitute every match of pattern in text.

    Returns text itself, not a copy, when nothing matched.
    """
    result, count = pattern.subn(repl, text)
    if not count:
        return text
    return result


def strip_html(text: str) -> str:
    """Remove comments, style/script blocks and tags."""
    return replace_all(HTML_RE, "", text)


def _codepoint(ref: str) -> int | None:
    """Return the code point of a numeric reference, or None if it has none."""
    digits = ref[2:].rstrip(";")
    if digits[:1] in ("x", "X"):
        codepoint = int(digits[1:], 16)
    else:
        # int() refuses very long strings, leading zeros included
        digits = digits.lstrip("0") or "0"
        if len(digits) > len(str(MAX_CODEPOINT)):
            return None
        codepoint = int(digits)
    if codepoint == 0 or codepoint > MAX_CODEPOINT or 0xD800 <= codepoint <= 0xDFFF:
        return None
    return codepoint


def _decode_reference(match: re.Match) -> str:
    ref = match.group(0)
    name = match.group(1)
    if name.startswith("#"):
        codepoint = _codepoint(ref)
        if codepoint is not None:
            # Re-spelled so html.unescape never converts the padded digits
            return html.unescape(f"&#{codepoint};")
        malformed = True
    else:
        # Unterminated names are left to html.unescape, which either finds a
        # legacy prefix (&ampx → &x) or keeps the text as is (&lang=en)
        malformed = name.endswith(";") and name not in html5
    if malformed:
        logger.debug("Malformed character reference: %r", ref)
        return MALFORMED_ENTITY_PLACEHOLDER.format(ref)
    return html.unescape(ref)


def decode_entities(text: str) -> str:
    """Decode named and numeric character references.

    Text without an '&' is returned untouched. A reference that cannot be
    decoded is replaced with a visible placeholder; the rest of the text is
    still decoded, so this never fails.
    """
    if "&" not in text:
        return text
    return replace_all(ENTITY_RE, _decode_reference, text)


def strip_html_for_speech(text: str) -> str:
    """Strip HTML for a TTS engine, then decode entities.

    Tags become a space rather than nothing, so "foo<br>bar" is spoken as
    two words.
    """
    return decode_entities(replace_all(HTML_RE, SPEECH_TAG_SEPARATOR, text))


def strip_html_preserving_image_filenames(text: str) -> str:
    """Strip HTML, but keep the filename of each <img> padded with spaces."""
    without_fnames = replace_all(IMG_TAG_RE, IMG_FILENAME_REPLACEMENT, text)
    return strip_html(without_fnames)
