"""Fixed-size word chunker: raw document text -> ordered chunks."""
from __future__ import annotations

import re

from docqa.schema import Chunk

DEFAULT_CHUNK_SIZE = 150

# Only space and newline separate words; tabs etc. stay inside words.
_WORD_SEPARATORS = re.compile(r"[ \n]")


def split_words(text: str) -> list[str]:
    return [w for w in _WORD_SEPARATORS.split(text) if w]


def chunk_text(text: str, size: int = DEFAULT_CHUNK_SIZE) -> list[Chunk]:
    """
    Group consecutive words into chunks of exactly `size` words (the last one holds the remainder).
    Chunk ids are 0, 1, 2, ... in document order. Empty text gives no chunks.
    """
    if size < 1:
        raise ValueError("chunk size must be a positive integer")
    words = split_words(text)
    chunks = []
    for chunk_id, start in enumerate(range(0, len(words), size)):
        chunks.append(Chunk(id=chunk_id, text=" ".join(words[start:start + size])))
    return chunks
