"""Word-level text manipulation."""

from __future__ import annotations

import re

_WORDS_AND_SPACES = re.compile(r" +|[^ ]+")


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping spacing intact."""
    return "".join(reversed(_WORDS_AND_SPACES.findall(text)))