"""Ranking: score every sentence against a query, keep the positive ones.

`rank_sentences()` is the primitive (sentence, score) ranking.  The
top-level `search()` applies a config on top of it and returns
`SearchResult` objects for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from narrowmind.index import CorpusIndex

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    position: int
    sentence_index: int
    sentence: str
    score: float
    preview: str

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "sentence_index": self.sentence_index,
            "sentence": self.sentence,
            "score": round(self.score, 6),
            "preview": self.preview,
        }


def _coerce_top_n(top_n: object) -> int:
    # bool is an int subclass; True must not mean "top 1"
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
        return 0
    return top_n


# ── Ranking ─────────────────────────────────────────────────────────


def score_sentences(index: CorpusIndex, query: object) -> list[tuple[int, float]]:
    """Score sentences by TF-IDF cosine.  Returns [(sentence_index, score)] descending.

    Zero-score sentences are dropped.  Ties keep corpus order (list.sort
    is stable).
    """
    if not query or not isinstance(query, str):
        return []

    scored: list[tuple[int, float]] = []
    for i, sentence in enumerate(index.sentences):
        score = index.similarity(query, sentence)
        if score > 0:
            scored.append((i, score))

    scored.sort(key=lambda x: x[1], reverse=True)
    return scored


def rank_sentences(
    index: CorpusIndex,
    query: object,
    top_n: int = 0,
) -> list[tuple[str, float]]:
    """Rank the index's sentences against ``query``.

    Returns [(sentence, score)] sorted by score, best first.  ``top_n`` > 0
    truncates; 0 (or anything that isn't a positive int) returns all.
    """
    scored = score_sentences(index, query)
    top_n = _coerce_top_n(top_n)
    if top_n > 0:
        scored = scored[:top_n]
    return [(index.sentences[i], score) for i, score in scored]


# ── Top-level search orchestrator ───────────────────────────────────


def search(query: str, config: dict, index: CorpusIndex) -> list[SearchResult]:
    """Rank with the settings from ``config`` and wrap the hits."""
    ranking = config.get("ranking", {})
    top_n = _coerce_top_n(ranking.get("top_n", 0))
    preview_chars = ranking.get("preview_chars", 120)

    scored = score_sentences(index, query)
    if top_n > 0:
        scored = scored[:top_n]

    logger.debug("query %r matched %d sentence(s)", query, len(scored))

    results: list[SearchResult] = []
    for position, (i, score) in enumerate(scored, 1):
        sentence = index.sentences[i]
        preview = sentence if len(sentence) <= preview_chars else sentence[:preview_chars] + "…"
        results.append(
            SearchResult(
                position=position,
                sentence_index=i,
                sentence=sentence,
                score=score,
                preview=preview,
            )
        )
    return results
