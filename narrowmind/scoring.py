"""TF, smoothed IDF, TF-IDF vectors and cosine similarity.

TF(t, d)  = count(t in d) / len(d)
IDF(t)    = ln((N + 1) / (df(t) + 1)) + 1      (0 for an empty corpus)
cos(a, b) = a·b / (‖a‖ ‖b‖)                    (0 if either norm is 0)
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np


def term_frequency(token: str, words: Sequence[str] | None) -> float:
    if not words:
        return 0.0
    return words.count(token) / len(words)


def inverse_document_frequency(token: str, documents: Sequence[Sequence[str]] | None) -> float:
    """Smoothed IDF of ``token`` over ``documents``.

    Always >= 1 for a non-empty corpus, exactly 1 when every document
    contains the token, ln(N+1)+1 when none does.
    """
    if not documents:
        return 0.0
    n = len(documents)
    df = sum(1 for doc in documents if token in doc)
    return math.log((n + 1) / (df + 1)) + 1


def ordered_vocabulary(*word_lists: Sequence[str]) -> list[str]:
    """Union of the given lists, in first-occurrence order."""
    return list(dict.fromkeys(token for words in word_lists for token in words))


def tfidf_vector(
    words: Sequence[str],
    vocabulary: Sequence[str],
    idf: Callable[[str], float],
) -> np.ndarray:
    """TF-IDF weights of ``words`` laid out along ``vocabulary``."""
    return np.array(
        [term_frequency(token, words) * idf(token) for token in vocabulary],
        dtype=np.float64,
    )


def cosine_similarity(vec1: np.ndarray, vec2: np.ndarray) -> float:
    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)
    if norm1 == 0 or norm2 == 0:
        return 0.0
    return float(np.dot(vec1, vec2) / (norm1 * norm2))
