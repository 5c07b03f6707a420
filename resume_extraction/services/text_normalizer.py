"""
Text normalization helpers.

The canonical text keeps its original casing for previews and prompts;
the lowercase view is only ever used for matching.
"""
import re

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def to_matchable(text: str) -> str:
    return (text or "").lower()


def preview(text: str, limit: int = 2000) -> str:
    return (text or "")[:limit]
