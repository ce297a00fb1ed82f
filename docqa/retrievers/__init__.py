from .base import BaseRetriever
from .chunker import DEFAULT_CHUNK_SIZE, chunk_text, split_words
from .tfidf import build_index, tokenize, vectorize
from .tfidf_retriever import IndexSnapshot, TfidfRetriever

__all__ = [
    "BaseRetriever",
    "DEFAULT_CHUNK_SIZE",
    "chunk_text",
    "split_words",
    "build_index",
    "tokenize",
    "vectorize",
    "IndexSnapshot",
    "TfidfRetriever",
]
