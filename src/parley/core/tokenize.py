# src/parley/core/tokenize.py
"""
Whitespace tokenization.

Only ASCII whitespace separates tokens; a non-breaking space stays inside
its token. Punctuation stays attached to its word: "cat." and "cat" are
different tokens.
"""

import re

WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return [t for t in WHITESPACE.split(text) if t]
