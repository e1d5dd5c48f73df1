"""Shared fixtures for card text tests."""

import pytest


@pytest.fixture
def av_text():
    """A field with one sound tag and one TTS tag between plain text."""
    return "abc[sound:fo&amp;o.mp3]def[anki:tts][en_US voices=Bob,Jane]foo<br>1&gt;2[/anki:tts]gh"


@pytest.fixture
def multiline_tts():
    """A TTS tag whose field text spans several lines."""
    return "[anki:tts][ja_JP]line one\n<b>line</b>\ntwo[/anki:tts]"
