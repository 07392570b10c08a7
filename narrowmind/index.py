"""Corpus index: one document per sentence, IDF precomputed and cached.

Built once from raw text.  Sentences, documents and the whole-text
token list are frozen after construction; only the IDF cache grows,
lazily, when a token that never occurred in the corpus is looked up.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from narrowmind.scoring import (
    cosine_similarity,
    inverse_document_frequency,
    ordered_vocabulary,
    term_frequency,
    tfidf_vector,
)
from narrowmind.searcher import rank_sentences
from narrowmind.stemmer import stem
from narrowmind.text import split_sentences, tokenize, tokenize_stemmed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenStats:
    token: str
    tf: float
    idf: float

    def to_dict(self) -> dict:
        return {"token": self.token, "tf": self.tf, "idf": self.idf}


def _normalize_token(token: object) -> str:
    if not isinstance(token, str):
        return ""
    return stem(token.lower())


class CorpusIndex:
    """TF-IDF statistics over the sentences of a single text."""

    def __init__(self, text: object):
        self.raw_text = text
        self.tokens: tuple[str, ...] = tuple(tokenize(text))
        self.sentences: tuple[str, ...] = tuple(split_sentences(text))
        self.documents: tuple[tuple[str, ...], ...] = tuple(
            tuple(tokenize_stemmed(sentence)) for sentence in self.sentences
        )
        self._stemmed_tokens: tuple[str, ...] = tuple(
            stem(token.lower()) for token in self.tokens
        )
        self._idf_lock = threading.Lock()
        self._idf_cache: dict[str, float] = self._precompute_idf()
        self.vocabulary: tuple[str, ...] = tuple(sorted(self._idf_cache))

        logger.debug(
            "indexed %d sentences, %d tokens, %d distinct stems",
            len(self.sentences),
            len(self.tokens),
            len(self.vocabulary),
        )

    def __len__(self) -> int:
        return len(self.sentences)

    def __repr__(self) -> str:
        return (
            f"CorpusIndex(sentences={len(self.sentences)}, "
            f"tokens={len(self.tokens)}, vocabulary={len(self.vocabulary)})"
        )

    # ── IDF ─────────────────────────────────────────────────────────

    def _precompute_idf(self) -> dict[str, float]:
        distinct = dict.fromkeys(token for doc in self.documents for token in doc)
        return {
            token: inverse_document_frequency(token, self.documents)
            for token in distinct
        }

    @property
    def cache_size(self) -> int:
        return len(self._idf_cache)

    def get_idf(self, token: str) -> float:
        """IDF of an already-stemmed token; computed and cached on a miss."""
        if not isinstance(token, str):
            token = ""
        with self._idf_lock:
            idf = self._idf_cache.get(token)
            if idf is None:
                idf = inverse_document_frequency(token, self.documents)
                self._idf_cache[token] = idf
                logger.debug("idf cache miss for %r → %.4f", token, idf)
        return idf

    # ── Term frequency ──────────────────────────────────────────────

    def get_tf(self, token: str) -> float:
        """Frequency of the token's stem across the whole text, not one sentence."""
        return term_frequency(_normalize_token(token), self._stemmed_tokens)

    def get_token_stats(self, token: str) -> TokenStats:
        stemmed = _normalize_token(token)
        return TokenStats(token=stemmed, tf=self.get_tf(token), idf=self.get_idf(stemmed))

    # ── Similarity & ranking ────────────────────────────────────────

    def similarity(self, sentence_a: object, sentence_b: object) -> float:
        """TF-IDF cosine similarity of two strings, weighted by corpus IDF."""
        words_a = tokenize_stemmed(sentence_a)
        words_b = tokenize_stemmed(sentence_b)
        if not words_a or not words_b:
            return 0.0

        vocabulary = ordered_vocabulary(words_a, words_b)
        vec_a = tfidf_vector(words_a, vocabulary, self.get_idf)
        vec_b = tfidf_vector(words_b, vocabulary, self.get_idf)
        return cosine_similarity(vec_a, vec_b)

    calculate_tfidf_similarity = similarity

    def rank_sentences(self, query: object, top_n: int = 0) -> list[tuple[str, float]]:
        return rank_sentences(self, query, top_n)
