"""Heuristic suffix stemmer.

Not a linguistic stemmer: an ordered cascade of suffix rules, first
match wins.  Each rule carries a length guard so short words are never
stripped down to nothing.  A suffix that matches but fails its guard
falls through to the remaining rules.

Known quirk, kept for reproducible scores: "runs" → "run" but
"running" → "runn".
"""

from __future__ import annotations

# (suffix, word length must exceed, replacement)
SUFFIX_RULES: tuple[tuple[str, int, str], ...] = (
    ("ies", 4, "y"),
    ("es", 4, ""),
    ("s", 3, ""),
    ("ing", 5, ""),
    ("ed", 4, ""),
    ("er", 4, ""),
    ("est", 5, ""),
    ("ly", 4, ""),
    ("tion", 6, ""),
    ("ness", 6, ""),
    ("ment", 6, ""),
)

MIN_STEM_LENGTH = 3


def stem(word: str | None) -> str | None:
    """Reduce ``word`` to an approximate root form.

    Words shorter than three characters, ""/``None`` and non-strings come back
    exactly as given, case untouched.  Everything else is lower-cased
    before the cascade runs.
    """
    if not isinstance(word, str) or len(word) < MIN_STEM_LENGTH:
        return word

    lowered = word.lower()
    for suffix, min_length, replacement in SUFFIX_RULES:
        if lowered.endswith(suffix) and len(lowered) > min_length:
            return lowered[: -len(suffix)] + replacement
    return lowered
