"""Document QA session: index a document, load a model, ask questions; each as a background task."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable

from docqa.documents import extract_text
from docqa.logging import log_index_build, log_query, now_seconds
from docqa.retrievers import DEFAULT_CHUNK_SIZE, TfidfRetriever, chunk_text
from docqa.schema import QueryResult
from .aggregator import QueryAggregator
from .llm import BaseGenerator, openai_generator_from_settings
from .observer import BaseObserver, RecordingObserver
from .prompt import DEFAULT_SYSTEM

logger = logging.getLogger(__name__)


def _default_log_dir() -> Path | None:
    try:
        from config.settings import LOG_DIR
        return LOG_DIR
    except Exception:
        return None


def _default_chunk_size() -> int:
    try:
        from config.settings import CHUNK_SIZE
        return CHUNK_SIZE
    except Exception:
        return DEFAULT_CHUNK_SIZE


class DocumentQASession:
    """
    Glue between extraction, the retriever, the generator and an observer.

    index_document / load_generator / ask are coroutines; the start_* / submit methods wrap
    them in fire-and-forget tasks. Failures are reported to the observer and leave the
    previous index / generator in place.
    """

    def __init__(
        self,
        observer: BaseObserver | None = None,
        retriever: TfidfRetriever | None = None,
        generator: BaseGenerator | None = None,
        generator_factory: Callable[[], BaseGenerator] | None = None,
        extractor: Callable[[Path], str] = extract_text,
        chunk_size: int | None = None,
        top_k: int | None = None,
        system_prompt: str = DEFAULT_SYSTEM,
        log_dir: Path | str | None = None,
    ) -> None:
        self.observer = observer if observer is not None else RecordingObserver()
        self.retriever = retriever if retriever is not None else TfidfRetriever()
        self.generator_factory = generator_factory or openai_generator_from_settings
        self.extractor = extractor
        self.chunk_size = chunk_size or _default_chunk_size()
        self.log_dir = Path(log_dir) if log_dir else _default_log_dir()
        self.aggregator = QueryAggregator(
            self.retriever,
            generator=generator,
            observer=self.observer,
            system_prompt=system_prompt,
            top_k=top_k,
        )
        self._query_task: asyncio.Task | None = None

    @property
    def generator(self) -> BaseGenerator | None:
        return self.aggregator.generator

    async def index_document(self, path: Path | str) -> int | None:
        """Extract, chunk and index a document. Returns the chunk count, or None on failure."""
        path = Path(path)
        self.observer.set_indexing(True)
        try:
            try:
                text = await asyncio.to_thread(self.extractor, path)
            except Exception as e:
                logger.error("Document extraction error: %s", e)
                self.observer.log(f"Document extraction error: {e}")
                return None
            return await self._index(text, source=str(path))
        finally:
            self.observer.set_indexing(False)

    async def index_text(self, text: str, source: str = "<text>") -> int:
        self.observer.set_indexing(True)
        try:
            return await self._index(text, source=source)
        finally:
            self.observer.set_indexing(False)

    async def _index(self, text: str, source: str) -> int:
        t0 = now_seconds()
        chunks = chunk_text(text, self.chunk_size)
        index = await asyncio.to_thread(self.retriever.build_index, chunks)
        log_index_build(source, len(chunks), index.term_count, now_seconds() - t0, log_dir=self.log_dir)
        self.observer.log(f"Document indexed, chunks: {len(chunks)}")
        logger.info("Document indexed, chunks: %d", len(chunks))
        return len(chunks)

    async def load_generator(self) -> bool:
        """Create the generator via the factory; on failure keep the previous one."""
        self.observer.set_loading_model(True)
        try:
            generator = await asyncio.to_thread(self.generator_factory)
        except Exception as e:
            logger.error("Failed to load model: %s", e)
            self.observer.log(f"Failed to load model: {e}")
            return False
        finally:
            self.observer.set_loading_model(False)
        self.aggregator.generator = generator
        self.observer.log("Model loaded successfully")
        return True

    async def ask(self, question: str, query_id: str | None = None) -> QueryResult:
        result = await self.aggregator.ask(question)
        if not result.superseded:
            log_query(result, log_dir=self.log_dir, query_id=query_id)
        return result

    def start_indexing(self, path: Path | str) -> asyncio.Task:
        return asyncio.create_task(self.index_document(path))

    def start_loading_model(self) -> asyncio.Task:
        return asyncio.create_task(self.load_generator())

    def submit(self, question: str, query_id: str | None = None) -> asyncio.Task:
        """Start a question in the background, cancelling a still-running previous one."""
        if self._query_task is not None and not self._query_task.done():
            self._query_task.cancel()
        self._query_task = asyncio.create_task(self.ask(question, query_id=query_id))
        return self._query_task
