"""Ask a question about a document: index it, load the model, stream the answer. Install deps first: pip install -e ."""
import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent
# Load .env first so OPENAI_API_KEY is set before any other code runs
load_dotenv(dotenv_path=str(ROOT / ".env"), encoding="utf-8")
sys.path.insert(0, str(ROOT))


async def answer(document: Path, question: str) -> int:
    from config import settings
    from docqa.documents import resolve_document
    from docqa.rag import ConsoleObserver, DocumentQASession

    document = resolve_document(document, settings.DATA_RAW)

    session = DocumentQASession(
        observer=ConsoleObserver(),
        chunk_size=settings.CHUNK_SIZE,
        top_k=settings.RETRIEVAL_TOP_K,
        system_prompt=settings.SYSTEM_PROMPT,
        log_dir=settings.LOG_DIR,
    )
    indexed, loaded = await asyncio.gather(session.start_indexing(document), session.start_loading_model())
    if indexed is None or not loaded:
        return 1
    result = await session.submit(question)
    print()
    print("Chunks asked:", len(result.chunk_ids), "failed:", len(result.failed_chunk_ids))
    return 0


def main():
    if len(sys.argv) < 2:
        print("Usage: python run.py <document.pdf|.txt> [question...]")
        return 2
    document = Path(sys.argv[1])
    # Question: from command line, or type when prompted
    if len(sys.argv) > 2:
        question = " ".join(sys.argv[2:]).strip()
    else:
        question = input("Enter your question: ").strip()
    if not question:
        question = "What is this document about?"
        print("(Using default question:", question, ")")
    if not (os.getenv("OPENAI_API_KEY") or "").strip():
        print("OPENAI_API_KEY not found. Check that .env exists in", ROOT, "with line: OPENAI_API_KEY=sk-...")
        return 1
    return asyncio.run(answer(document, question))


if __name__ == "__main__":
    sys.exit(main())
