"""Find, strip and flag [sound:...] and [anki:tts]...[/anki:tts] tags."""

import itertools
from typing import Iterator

from card_text.constants import (
    ARG_VALUE_SEPARATOR,
    AV_PLAY_MARKER,
    TTS_ARG_SEPARATOR,
    VOICES_ARG_PREFIX,
    VOICES_SEPARATOR,
)
from card_text.markup import decode_entities, replace_all, strip_html_for_speech
from card_text.models import AVTag, SoundOrVideo, TextToSpeech
from card_text.patterns import AV_TAG_RE


def strip_av_tags(text: str) -> str:
    """Remove every sound and TTS tag."""
    return replace_all(AV_TAG_RE, "", text)


def flag_av_tags(text: str) -> str:
    """Replace the Nth AV tag with [anki:play]N[/anki:play].

    N matches the position of the tag in iterate_av_tags(text), so a player
    can map a placeholder back to what it should play.
    """
    counter = itertools.count()
    return replace_all(AV_TAG_RE, lambda _match: AV_PLAY_MARKER.format(next(counter)), text)


def tts_tag_from_string(field_text: str, args: str) -> TextToSpeech:
    """Build a TextToSpeech tag from its field text and argument string.

    "en_US voices=Bob,Jane speed=1.2" → lang="en_US", voices=["Bob", "Jane"],
    other_args=["speed=1.2"]. If voices= is given more than once, the last
    one is used.
    """
    lang, *remaining = args.split(TTS_ARG_SEPARATOR)
    voices = []
    other_args = []

    for arg in remaining:
        if arg.startswith(VOICES_ARG_PREFIX):
            voices = arg.split(ARG_VALUE_SEPARATOR)[1].split(VOICES_SEPARATOR)
        else:
            other_args.append(arg)

    return TextToSpeech(
        field_text=strip_html_for_speech(field_text),
        lang=lang,
        voices=voices,
        other_args=other_args,
    )


def iterate_av_tags(text: str) -> Iterator[AVTag]:
    """Yield each AV tag in text, left to right.

    The scan is lazy; call again to start over.
    """
    for match in AV_TAG_RE.finditer(text):
        filename = match.group(1)
        if filename is not None:
            yield SoundOrVideo(decode_entities(filename))
        else:
            yield tts_tag_from_string(match.group(3), match.group(2))


def extract_av_tags(text: str) -> tuple[str, list[AVTag]]:
    """Return text with tags flagged for playback, plus the tags themselves."""
    return flag_av_tags(text), list(iterate_av_tags(text))
