"""Tests for constants and models (Layer 0)."""

from pathlib import Path

import pytest

from card_text.models import SoundOrVideo, TextToSpeech
from card_text import constants


def test_sound_or_video_dataclass():
    """SoundOrVideo holds a filename and compares by value."""
    tag = SoundOrVideo("foo.mp3")
    assert tag.filename == "foo.mp3"
    assert tag == SoundOrVideo(filename="foo.mp3")


def test_text_to_speech_defaults():
    """Voices and other args default to empty, unshared lists."""
    first = TextToSpeech(field_text="hi", lang="en_US")
    second = TextToSpeech(field_text="hi", lang="en_US")
    assert first.voices == []
    assert first.other_args == []
    first.voices.append("Bob")
    assert second.voices == []


def test_av_play_marker_format():
    """The play marker carries the tag index."""
    assert constants.AV_PLAY_MARKER.format(3) == "[anki:play]3[/anki:play]"


def test_constants_exist():
    """All module-level constants are defined."""
    expected = [
        "AV_PLAY_MARKER",
        "SPEECH_TAG_SEPARATOR",
        "IMG_FILENAME_REPLACEMENT",
        "TTS_ARG_SEPARATOR",
        "VOICES_ARG_PREFIX",
        "VOICES_SEPARATOR",
        "ARG_VALUE_SEPARATOR",
        "MAX_CLOZE_NUMBER",
        "MAX_CODEPOINT",
        "MALFORMED_ENTITY_PLACEHOLDER",
        "VERSION",
    ]
    for name in expected:
        assert hasattr(constants, name), f"Missing constant: {name}"


def test_version_is_packaging_source():
    """pyproject.toml reads its version from constants.VERSION."""
    tomllib = pytest.importorskip("tomllib")
    with open(Path(__file__).parent.parent / "pyproject.toml", "rb") as f:
        pyproject = tomllib.load(f)
    assert "version" in pyproject["project"]["dynamic"]
    attr = pyproject["tool"]["setuptools"]["dynamic"]["version"]["attr"]
    assert attr == "card_text.constants.VERSION"
    assert constants.VERSION.count(".") == 2
