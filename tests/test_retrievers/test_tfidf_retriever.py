"""Test retriever interface: index swap, lookup and ranking."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(ROOT))

from docqa.retrievers import BaseRetriever, TfidfRetriever, chunk_text
from docqa.schema import Chunk, RankedChunk


@pytest.fixture
def retriever() -> TfidfRetriever:
    r = TfidfRetriever()
    r.build_index([
        Chunk(id=0, text="cats are mammals"),
        Chunk(id=1, text="the refund policy allows a full refund"),
        Chunk(id=2, text="contact support for billing help"),
        Chunk(id=3, text="dogs are mammals too"),
    ])
    return r


def test_empty_retriever() -> None:
    r = TfidfRetriever()
    assert isinstance(r, BaseRetriever)
    assert r.is_empty()
    assert r.chunks == ()
    assert r.rank("anything") == []


def test_build_index_replaces_previous_document(retriever: TfidfRetriever) -> None:
    index = retriever.build_index([Chunk(id=0, text="brand new text")])
    assert [c.text for c in retriever.chunks] == ["brand new text"]
    assert len(index.vectors) == 1
    assert "cats" not in retriever.index.idf
    assert retriever.index is index


def test_build_index_idempotent(retriever: TfidfRetriever) -> None:
    chunks = list(retriever.chunks)
    first = retriever.index
    second = retriever.build_index(chunks)
    assert first.idf == second.idf
    assert first.vectors == second.vectors


def test_snapshot_is_unaffected_by_reindex(retriever: TfidfRetriever) -> None:
    snap = retriever.snapshot()
    retriever.build_index(chunk_text("x y z", size=1))
    assert len(snap.chunks) == 4
    assert len(snap.index.vectors) == 4
    assert len(retriever.chunks) == 3


def test_get_chunk(retriever: TfidfRetriever) -> None:
    assert retriever.get_chunk(2).text.startswith("contact")
    with pytest.raises(KeyError):
        retriever.get_chunk(99)


def test_rank_puts_matching_chunk_first(retriever: TfidfRetriever) -> None:
    ranking = retriever.rank("What is the refund policy?")
    assert ranking[0].chunk_id == 1
    assert ranking[0].score > 0
    assert len(ranking) == 4


def test_rank_chunk_own_text_ranks_itself_first(retriever: TfidfRetriever) -> None:
    for chunk in retriever.chunks:
        assert retriever.rank(chunk.text)[0].chunk_id == chunk.id


def test_rank_sorted_desc_with_ascending_id_ties(retriever: TfidfRetriever) -> None:
    ranking = retriever.rank("mammals")
    # both contain "mammals"; chunk 0 has fewer other terms diluting it
    assert [r.chunk_id for r in ranking[:2]] == [0, 3]
    zero = [r.chunk_id for r in ranking if r.score == 0.0]
    assert zero == [1, 2]
    scores = [r.score for r in ranking]
    assert scores == sorted(scores, reverse=True)


def test_rank_ties_broken_by_chunk_id() -> None:
    r = TfidfRetriever()
    r.build_index([Chunk(id=0, text="alpha"), Chunk(id=1, text="beta"), Chunk(id=2, text="alpha")])
    ranking = r.rank("alpha")
    assert ranking == [
        RankedChunk(chunk_id=0, score=ranking[0].score),
        RankedChunk(chunk_id=2, score=ranking[0].score),
        RankedChunk(chunk_id=1, score=0.0),
    ]


def test_rank_query_without_known_terms(retriever: TfidfRetriever) -> None:
    ranking = retriever.rank("zebra ???")
    assert [r.chunk_id for r in ranking] == [0, 1, 2, 3]
    assert all(r.score == 0.0 for r in ranking)


def test_rank_does_not_change_idf(retriever: TfidfRetriever) -> None:
    before = dict(retriever.index.idf)
    retriever.rank("novel words never indexed")
    assert retriever.index.idf == before
    assert retriever.query_vector("novel refund") == {"refund": 0.5 * before["refund"]}


def test_rank_top_k_and_select(retriever: TfidfRetriever) -> None:
    assert len(retriever.rank("refund", top_k=2)) == 2
    selected = retriever.select("dogs cats", top_k=2)
    assert [c.id for c in selected] == [0, 3]


def test_select_ranks_and_filters_one_snapshot(retriever: TfidfRetriever, monkeypatch: pytest.MonkeyPatch) -> None:
    rank = TfidfRetriever._rank

    def rank_then_reindex(snapshot, query, top_k):
        out = rank(snapshot, query, top_k)
        retriever.build_index([Chunk(id=0, text="unrelated"), Chunk(id=1, text="other")])
        return out

    monkeypatch.setattr(TfidfRetriever, "_rank", staticmethod(rank_then_reindex))
    selected = retriever.select("dogs cats", top_k=2)
    assert [c.text for c in selected] == ["cats are mammals", "dogs are mammals too"]
