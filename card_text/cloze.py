"""Cloze deletion ordinals."""

import logging

from card_text.constants import MAX_CLOZE_NUMBER
from card_text.patterns import CLOZE_RE

logger = logging.getLogger(__name__)


def cloze_numbers_in_string(text: str) -> set[int]:
    """Return the distinct N of every {{cN::...}} in text.

    Ordinals too large for a 16-bit card ordinal are skipped.
    """
    numbers = set()
    for match in CLOZE_RE.finditer(text):
        digits = match.group(1).lstrip("0") or "0"
        if len(digits) > len(str(MAX_CLOZE_NUMBER)) or int(digits) > MAX_CLOZE_NUMBER:
            logger.debug("Skipping out-of-range cloze number: %s", digits)
            continue
        numbers.add(int(digits))
    return numbers
