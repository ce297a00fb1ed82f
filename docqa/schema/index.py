"""TF-IDF index snapshot and ranking result."""
from pydantic import BaseModel, ConfigDict


class TfidfIndex(BaseModel):
    """idf table plus one sparse vector per chunk (vectors[i] belongs to chunk i)."""
    model_config = ConfigDict(frozen=True)

    idf: dict[str, float] = {}
    vectors: list[dict[str, float]] = []

    @property
    def term_count(self) -> int:
        return len(self.idf)


class RankedChunk(BaseModel):
    """One entry of a ranking: chunk id and its similarity to the query."""
    model_config = ConfigDict(frozen=True)

    chunk_id: int
    score: float
