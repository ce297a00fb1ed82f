"""Pluggable retriever interface."""
from abc import ABC, abstractmethod

from docqa.schema import Chunk, RankedChunk


class BaseRetriever(ABC):
    """Interface for retrievers: owns a chunk set, ranks it against a query."""

    name: str

    @property
    @abstractmethod
    def chunks(self) -> tuple[Chunk, ...]:
        """Chunks currently indexed, in chunk-id order."""
        ...

    @abstractmethod
    def build_index(self, chunks: list[Chunk]):
        """Replace the held chunks and rebuild the index from scratch."""
        ...

    @abstractmethod
    def rank(self, query: str, top_k: int | None = None) -> list[RankedChunk]:
        """Chunks sorted by descending score, ties by ascending chunk id."""
        ...

    def is_empty(self) -> bool:
        return not self.chunks
