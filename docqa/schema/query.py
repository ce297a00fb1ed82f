"""Query lifecycle and result of one aggregation run."""
from enum import Enum

from pydantic import BaseModel


class QueryState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class QueryResult(BaseModel):
    """Final answer of one question plus which chunks were asked and which failed."""
    question: str
    answer: str
    state: QueryState = QueryState.COMPLETED
    chunk_ids: list[int] = []
    failed_chunk_ids: list[int] = []
    superseded: bool = False
    latency_seconds: float = 0.0
