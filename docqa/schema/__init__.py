from .chunk import Chunk
from .index import RankedChunk, TfidfIndex
from .query import QueryResult, QueryState

__all__ = ["Chunk", "RankedChunk", "TfidfIndex", "QueryResult", "QueryState"]
