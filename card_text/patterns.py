"""Compiled matchers shared by every text operation.

Compiled once at import and never mutated, so the same objects are used
from any thread.
"""

import re

# Comments and style/script blocks go with their contents; anything else
# between angle brackets is a plain tag
HTML_RE = re.compile(
    r"(<!--.*?-->)|(<style.*?>.*?</style>)|(<script.*?>.*?</script>)"
    r"|(<.*?>)",
    re.IGNORECASE | re.DOTALL,
)

# Group 1 is the filename
IMG_TAG_RE = re.compile(r"""<img[^>]+src=["']?([^"'>]+)["']?[^>]*>""", re.IGNORECASE)

# Videos are also in sound tags
AV_TAG_RE = re.compile(
    r"""
    \[sound:(.*?)\]     # 1 - the filename in a sound tag
    |
    \[anki:tts\]
        \[(.*?)\]       # 2 - arguments to the tts call
        (.*?)           # 3 - field text
    \[/anki:tts\]
    """,
    re.VERBOSE | re.DOTALL,
)

# Group 1 is the cloze ordinal
CLOZE_RE = re.compile(r"\{\{c([0-9]+)::.+?\}\}", re.DOTALL)

# Numeric (&#62; &#x3e;) and named (&gt;) character references
ENTITY_RE = re.compile(r"&(#[0-9]+;?|#[xX][0-9a-fA-F]+;?|[A-Za-z][A-Za-z0-9]*;?)")
