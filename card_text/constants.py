"""All magic strings, limits and placeholder formats."""

AV_PLAY_MARKER = "[anki:play]{}[/anki:play]"   # stands in for the Nth AV tag
SPEECH_TAG_SEPARATOR = " "                      # keeps words apart when tags are dropped for TTS
IMG_FILENAME_REPLACEMENT = r" \1 "              # <img src=FILE> → " FILE "
TTS_ARG_SEPARATOR = " "                         # [anki:tts][en_US voices=Bob speed=1.2]
VOICES_ARG_PREFIX = "voices="
VOICES_SEPARATOR = ","
ARG_VALUE_SEPARATOR = "="                       # voices=Bob,Jane → name, value
MAX_CLOZE_NUMBER = 65535                        # cloze ordinals are 16-bit unsigned
MAX_CODEPOINT = 0x10FFFF
MALFORMED_ENTITY_PLACEHOLDER = "[malformed entity: {}]"
VERSION = "0.1.0"
