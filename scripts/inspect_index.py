"""Index a document and show how chunks rank for a query (no LLM calls).
Usage:
  Run: python scripts/inspect_index.py paper.pdf "what is the refund policy"
  Relative paths not found in the working directory are looked up under DATA_RAW.
  Prints chunk and term counts, then the top chunks by cosine similarity.
"""
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from config.settings import CHUNK_SIZE, DATA_RAW
from docqa.documents import extract_text, resolve_document
from docqa.errors import ExtractionError
from docqa.retrievers import TfidfRetriever, chunk_text


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("document", type=Path)
    parser.add_argument("query", nargs="*")
    parser.add_argument("--chunk-size", type=int, default=CHUNK_SIZE)
    parser.add_argument("--top-k", type=int, default=5)
    args = parser.parse_args()

    try:
        text = extract_text(resolve_document(args.document, DATA_RAW))
    except ExtractionError as e:
        print("Document extraction error:", e)
        return 1
    retriever = TfidfRetriever()
    index = retriever.build_index(chunk_text(text, args.chunk_size))
    print(f"Chunks: {len(retriever.chunks)}, terms: {index.term_count}")

    query = " ".join(args.query).strip()
    if not query:
        return 0
    for rank, r in enumerate(retriever.rank(query, top_k=args.top_k), 1):
        preview = retriever.get_chunk(r.chunk_id).text[:80]
        print(f"{rank:>3}. chunk {r.chunk_id:<5} score={r.score:.4f}  {preview}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
