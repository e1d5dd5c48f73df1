"""Data models for audio/video and text-to-speech tags found in card text."""

from dataclasses import dataclass, field


@dataclass
class SoundOrVideo:
    filename: str      # entity-decoded


@dataclass
class TextToSpeech:
    field_text: str                                       # html stripped, entities decoded
    lang: str                                             # "" when no args were given
    voices: list[str] = field(default_factory=list)
    other_args: list[str] = field(default_factory=list)


AVTag = SoundOrVideo | TextToSpeech
