"""NarrowMind S2: TF-IDF sentence ranking over a single text."""

from narrowmind.index import CorpusIndex, TokenStats
from narrowmind.scoring import cosine_similarity, inverse_document_frequency, term_frequency
from narrowmind.searcher import SearchResult, rank_sentences, search
from narrowmind.stemmer import stem
from narrowmind.text import split_sentences, tokenize, tokenize_stemmed

__all__ = [
    "CorpusIndex",
    "SearchResult",
    "TokenStats",
    "cosine_similarity",
    "inverse_document_frequency",
    "rank_sentences",
    "search",
    "split_sentences",
    "stem",
    "term_frequency",
    "tokenize",
    "tokenize_stemmed",
]
