"""Text cleanup for inbound turns and outbound replies. Re-runnable."""

import re
from unicodedata import normalize as unicode_normalize

# C0/C1 control characters except tab and newline
CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")
INLINE_SPACE_PATTERN = re.compile(r"[ \t]+")
BLANK_LINES_PATTERN = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """
    Normalize a single-line turn: NFC, collapse all whitespace, strip.
    Keep predictable; no rewriting of content.
    """
    if not text:
        return ""
    t = unicode_normalize("NFC", text)
    t = CONTROL_PATTERN.sub(" ", t)
    t = re.sub(r"\s+", " ", t)
    return t.strip()


def sanitize_reply(text: str) -> str:
    """
    Clean provider text for display: NFC, drop control characters, collapse runs of
    spaces and blank lines, strip. Line breaks the model chose are kept.
    """
    if not text:
        return ""
    t = unicode_normalize("NFC", text).replace("\r\n", "\n").replace("\r", "\n")
    t = CONTROL_PATTERN.sub("", t)
    t = "\n".join(INLINE_SPACE_PATTERN.sub(" ", line).strip() for line in t.split("\n"))
    t = BLANK_LINES_PATTERN.sub("\n\n", t)
    return t.strip()
