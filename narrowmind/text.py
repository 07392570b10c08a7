"""Shared text segmentation for the corpus index and the query side.

Both sides must tokenize identically: a query stemmed differently from
the sentences would never share a term with them.
"""

from __future__ import annotations

import re

from narrowmind.stemmer import stem

# A token is a run of Unicode letters/digits; "_" counts as a separator.
_TOKEN_RE = re.compile(r"[^\W_]+")

SENTENCE_DELIMITERS = '.!?,"“”„:;\n'
_SENTENCE_SPLIT_RE = re.compile("[" + re.escape(SENTENCE_DELIMITERS) + "]+")


def tokenize(text: object) -> list[str]:
    """Letter/digit runs of ``text`` in order, case preserved."""
    if not text or not isinstance(text, str):
        return []
    return _TOKEN_RE.findall(text)


def split_sentences(text: object) -> list[str]:
    """Split on punctuation, quotes and newlines → trimmed, non-empty pieces."""
    if not text or not isinstance(text, str):
        return []
    pieces = (piece.strip() for piece in _SENTENCE_SPLIT_RE.split(text))
    return [piece for piece in pieces if piece]


def tokenize_stemmed(text: object) -> list[str]:
    """Tokenize → lowercase → stem."""
    return [stem(token.lower()) for token in tokenize(text)]
