"""
MargDarshak Response Sanitizer
Post-processing for provider answers before they reach the chat.
"""

import re

from agent.prompts import STATE_REDIRECT_MESSAGE
from config.parameters import (
    META_COMMENTARY_PHRASES,
    SPECIFIC_DATA_MARKERS,
    SUBSTANTIVE_MARKERS,
)

_LINE_BREAK_RE = re.compile(r"<br\s*/?>|&lt;br\s*/?&gt;")


def filter_out_meta_commentary(response: str, state_name: str) -> str:
    """
    Replace answers that only discuss missing data with a redirect for *state_name*.

    Answers containing a table, a heading or "Location" are always kept, as are
    answers that still name "NH" or "hotspot".
    """
    if any(marker in response for marker in SUBSTANTIVE_MARKERS):
        return response

    lowered = response.lower()
    has_meta = any(phrase in lowered for phrase in META_COMMENTARY_PHRASES)
    if has_meta and not any(marker in response for marker in SPECIFIC_DATA_MARKERS):
        return STATE_REDIRECT_MESSAGE.format(state=state_name)

    return response


def normalize_line_breaks(text: str) -> str:
    """Turn literal or escaped <br> tags into newlines for markdown rendering."""
    return _LINE_BREAK_RE.sub("\n", text)
