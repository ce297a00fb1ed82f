"""TF-IDF math: tokenizer, smoothed idf, sparse chunk/query vectors, cosine similarity."""
from __future__ import annotations

import math
import re
from collections import Counter
from typing import Iterable

from docqa.schema import Chunk, TfidfIndex

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def tokenize(text: str) -> list[str]:
    """Lowercase, split on every non-ASCII-alphanumeric character, drop empty tokens."""
    return [t for t in _NON_ALNUM.split(text.lower()) if t]


def document_frequency(tokenized: Iterable[list[str]]) -> dict[str, int]:
    """term -> number of chunks containing it (repeats inside a chunk count once)."""
    df: dict[str, int] = {}
    for tokens in tokenized:
        for term in dict.fromkeys(tokens):
            df[term] = df.get(term, 0) + 1
    return df


def smoothed_idf(df: dict[str, int], n_docs: int) -> dict[str, float]:
    """ln((N + 1) / (df + 1)) + 1, always > 0."""
    return {term: math.log((n_docs + 1) / (count + 1)) + 1.0 for term, count in df.items()}


def vectorize(tokens: list[str], idf: dict[str, float]) -> dict[str, float]:
    """Sparse tf * idf vector; tf is normalized by token count. Terms unknown to idf are left out."""
    if not tokens:
        return {}
    total = len(tokens)
    counts = Counter(tokens)
    return {term: (count / total) * idf[term] for term, count in counts.items() if term in idf}


def build_index(chunks: list[Chunk]) -> TfidfIndex:
    """Build a fresh index over chunks. Pure: the same chunks always give the same index."""
    tokenized = [tokenize(c.text) for c in chunks]
    idf = smoothed_idf(document_frequency(tokenized), len(tokenized))
    vectors = [vectorize(tokens, idf) for tokens in tokenized]
    return TfidfIndex(idf=idf, vectors=vectors)


def cosine_similarity(a: dict[str, float], b: dict[str, float]) -> float:
    """Cosine of two sparse vectors; 0.0 when either is empty."""
    if not a or not b:
        return 0.0
    small, large = (a, b) if len(a) <= len(b) else (b, a)
    dot = sum(w * large[t] for t, w in small.items() if t in large)
    if dot == 0.0:
        return 0.0
    norm_a = math.sqrt(sum(w * w for w in a.values()))
    norm_b = math.sqrt(sum(w * w for w in b.values()))
    return dot / (norm_a * norm_b)
