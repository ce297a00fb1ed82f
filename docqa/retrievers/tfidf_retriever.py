"""TF-IDF retriever: holds the current document's chunks and index, ranks them by cosine similarity."""
from __future__ import annotations

from typing import NamedTuple

from docqa.schema import Chunk, RankedChunk, TfidfIndex
from .base import BaseRetriever
from .tfidf import build_index, cosine_similarity, tokenize, vectorize


class IndexSnapshot(NamedTuple):
    chunks: tuple[Chunk, ...]
    index: TfidfIndex


_EMPTY = IndexSnapshot(chunks=(), index=TfidfIndex())


class TfidfRetriever(BaseRetriever):
    """
    Chunks and index are swapped together as one immutable snapshot, so a reader that
    captured `snapshot()` (or `chunks`) keeps a consistent view while a new document is indexed.
    """

    name = "tfidf"

    def __init__(self) -> None:
        self._snapshot = _EMPTY

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        return self._snapshot.chunks

    @property
    def index(self) -> TfidfIndex:
        return self._snapshot.index

    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    def build_index(self, chunks: list[Chunk]) -> TfidfIndex:
        """Replace chunks (never merged with the previous document) and rebuild idf/vectors."""
        chunks = tuple(chunks)
        index = build_index(list(chunks))
        self._snapshot = IndexSnapshot(chunks=chunks, index=index)
        return index

    def get_chunk(self, chunk_id: int) -> Chunk:
        chunks = self._snapshot.chunks
        if 0 <= chunk_id < len(chunks) and chunks[chunk_id].id == chunk_id:
            return chunks[chunk_id]
        for c in chunks:
            if c.id == chunk_id:
                return c
        raise KeyError(chunk_id)

    def query_vector(self, query: str) -> dict[str, float]:
        """Vectorize the query with the held idf; the query never feeds back into idf."""
        return vectorize(tokenize(query), self._snapshot.index.idf)

    def rank(self, query: str, top_k: int | None = None) -> list[RankedChunk]:
        """Cosine similarity of the query against every chunk, descending, ties by ascending chunk id."""
        return self._rank(self._snapshot, query, top_k)

    @staticmethod
    def _rank(snapshot: IndexSnapshot, query: str, top_k: int | None) -> list[RankedChunk]:
        chunks, index = snapshot
        q = vectorize(tokenize(query), index.idf)
        scored = [
            RankedChunk(chunk_id=c.id, score=cosine_similarity(q, vec))
            for c, vec in zip(chunks, index.vectors)
        ]
        scored.sort(key=lambda r: (-r.score, r.chunk_id))
        if top_k is not None:
            scored = scored[:max(top_k, 0)]
        return scored

    def select(self, query: str, top_k: int) -> list[Chunk]:
        """Top-k chunks for the query, returned in chunk-id (document) order."""
        snapshot = self._snapshot
        wanted = {r.chunk_id for r in self._rank(snapshot, query, top_k)}
        return [c for c in snapshot.chunks if c.id in wanted]
