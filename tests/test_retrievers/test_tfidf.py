"""Test TF-IDF tokenizer, idf smoothing and sparse vectors."""
import math
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(ROOT))

from docqa.retrievers import build_index, chunk_text, tokenize, vectorize
from docqa.retrievers.tfidf import cosine_similarity, document_frequency
from docqa.schema import Chunk


def test_tokenize_lowercases_and_splits_on_non_alnum() -> None:
    assert tokenize("Hello, World! e-mail v2.0") == ["hello", "world", "e", "mail", "v2", "0"]
    assert tokenize("  ...  ") == []
    assert tokenize("café") == ["caf"]


def test_document_frequency_counts_each_chunk_once() -> None:
    df = document_frequency([["a", "a", "b"], ["a"]])
    assert df == {"a": 2, "b": 1}


def test_idf_formula() -> None:
    chunks = [Chunk(id=0, text="cat dog"), Chunk(id=1, text="cat"), Chunk(id=2, text="fish")]
    index = build_index(chunks)
    assert index.idf["cat"] == math.log(4 / 3) + 1
    assert index.idf["dog"] == math.log(4 / 2) + 1
    assert index.idf["fish"] == math.log(4 / 2) + 1


def test_idf_positive_even_for_terms_in_every_chunk(sample_text: str) -> None:
    index = build_index(chunk_text(sample_text, size=3))
    assert index.idf
    assert all(v > 0 for v in index.idf.values())
    single = build_index([Chunk(id=0, text="same same")])
    assert single.idf["same"] == 1.0


def test_vectors_are_sparse_and_aligned(sample_text: str) -> None:
    chunks = chunk_text(sample_text, size=4)
    index = build_index(chunks)
    assert len(index.vectors) == len(chunks)
    for chunk, vec in zip(chunks, index.vectors):
        assert set(vec) == set(tokenize(chunk.text))


def test_tf_normalized_by_chunk_token_count() -> None:
    index = build_index([Chunk(id=0, text="a a b"), Chunk(id=1, text="c")])
    vec = index.vectors[0]
    assert vec["a"] == (2 / 3) * index.idf["a"]
    assert vec["b"] == (1 / 3) * index.idf["b"]


def test_chunk_without_tokens_has_empty_vector() -> None:
    index = build_index([Chunk(id=0, text="--- !!!"), Chunk(id=1, text="word")])
    assert index.vectors[0] == {}
    assert "word" in index.vectors[1]


def test_build_index_is_deterministic(sample_text: str) -> None:
    chunks = chunk_text(sample_text, size=5)
    a = build_index(chunks)
    b = build_index(chunks)
    assert a.idf == b.idf
    assert a.vectors == b.vectors
    assert list(a.idf) == list(b.idf)


def test_vectorize_ignores_unknown_terms() -> None:
    idf = {"known": 2.0}
    assert vectorize(["known", "unknown"], idf) == {"known": 0.5 * 2.0}
    assert vectorize([], idf) == {}


def test_cosine_similarity() -> None:
    assert cosine_similarity({}, {"a": 1.0}) == 0.0
    assert cosine_similarity({"a": 1.0}, {"b": 1.0}) == 0.0
    assert abs(cosine_similarity({"a": 2.0}, {"a": 3.0}) - 1.0) < 1e-12
