"""Per-chunk question answering: stream each chunk's answer and stitch them into one final answer."""
from __future__ import annotations

import asyncio
import logging

from docqa.errors import ChunkGenerationError
from docqa.logging import now_seconds
from docqa.retrievers import TfidfRetriever
from docqa.schema import Chunk, QueryResult, QueryState
from .llm import BaseGenerator
from .observer import BaseObserver
from .prompt import DEFAULT_SYSTEM, build_prompt

logger = logging.getLogger(__name__)

NO_DOCUMENT_ANSWER = "No document indexed."
NO_GENERATOR_ANSWER = "No model loaded."
NOT_FOUND_ANSWER = "Not found in document."
CHUNK_SEPARATOR = "\n"


class QueryAggregator:
    """
    Answer one question by asking the generator about every chunk in chunk-id order, one chunk
    at a time. After each token the observer gets `completed answers + current chunk's tokens`;
    a chunk whose stream fails contributes nothing and the run continues.

    Every ask() takes a new run number. A run that is no longer the latest stops at its next
    token or chunk boundary and never publishes again, so two runs never interleave output.

    top_k=None asks every chunk. An integer asks only the top_k chunks ranked against the
    question, still in chunk-id order.
    """

    def __init__(
        self,
        retriever: TfidfRetriever,
        generator: BaseGenerator | None = None,
        observer: BaseObserver | None = None,
        system_prompt: str = DEFAULT_SYSTEM,
        top_k: int | None = None,
    ) -> None:
        self.retriever = retriever
        self.generator = generator
        self.observer = observer
        self.system_prompt = system_prompt
        self.top_k = top_k
        self.state = QueryState.IDLE
        self.answer = ""
        self._run_id = 0

    def is_current(self, run_id: int) -> bool:
        return run_id == self._run_id

    def _publish(self, run_id: int, text: str) -> None:
        if not self.is_current(run_id):
            return
        self.answer = text
        self._notify("set_answer", text)

    def _log(self, run_id: int, line: str) -> None:
        if self.is_current(run_id):
            self._notify("log", line)

    def _notify(self, method: str, value: str) -> None:
        # observer errors never count as chunk failures or abort the run
        if self.observer is None:
            return
        try:
            getattr(self.observer, method)(value)
        except Exception:
            logger.exception("Observer %s failed", method)

    def chunks_for(self, question: str) -> tuple[Chunk, ...]:
        """Chunks to ask about, captured once so a concurrent re-index cannot affect the run."""
        if self.top_k is None:
            return self.retriever.chunks
        return tuple(self.retriever.select(question, self.top_k))

    def _finish(self, run_id: int, result: QueryResult) -> QueryResult:
        self._publish(run_id, result.answer)
        if self.is_current(run_id):
            self.state = QueryState.COMPLETED
        return result

    async def ask(self, question: str) -> QueryResult:
        self._run_id += 1
        run_id = self._run_id
        t0 = now_seconds()
        self.state = QueryState.IDLE
        self._publish(run_id, "")

        if self.retriever.is_empty():
            return self._finish(run_id, QueryResult(question=question, answer=NO_DOCUMENT_ANSWER))
        generator = self.generator
        if generator is None:
            return self._finish(run_id, QueryResult(question=question, answer=NO_GENERATOR_ANSWER))

        chunks = self.chunks_for(question)
        self.state = QueryState.RUNNING
        completed = ""
        asked: list[int] = []
        failed: list[int] = []

        for chunk in chunks:
            if not self.is_current(run_id):
                return self._superseded(question, completed, asked, failed, t0)
            asked.append(chunk.id)
            prompt = build_prompt(self.system_prompt, question, chunk.text)
            try:
                chunk_answer, finished = await self._stream_chunk(run_id, generator, prompt, completed)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                err = ChunkGenerationError(chunk.id, e)
                logger.warning("LLM chunk error: %s", err)
                self._log(run_id, f"LLM chunk error: {err}")
                failed.append(chunk.id)
                continue
            if not finished:
                return self._superseded(question, completed, asked, failed, t0)
            completed += chunk_answer + CHUNK_SEPARATOR

        answer = completed.strip() or NOT_FOUND_ANSWER
        logger.info("Full QA output length: %d", len(answer))
        return self._finish(run_id, QueryResult(
            question=question,
            answer=answer,
            chunk_ids=asked,
            failed_chunk_ids=failed,
            latency_seconds=now_seconds() - t0,
        ))

    async def _stream_chunk(self, run_id: int, generator: BaseGenerator, prompt, completed: str) -> tuple[str, bool]:
        """Fold the token stream into the chunk's answer. Returns (text, False) if superseded mid-stream."""
        chunk_answer = ""
        stream = generator.stream(prompt)
        try:
            async for token in stream:
                if not self.is_current(run_id):
                    return chunk_answer, False
                chunk_answer += token
                self._publish(run_id, completed + chunk_answer)
        finally:
            aclose = getattr(stream, "aclose", None)
            if aclose is not None:
                await aclose()
        return chunk_answer, True

    @staticmethod
    def _superseded(question: str, completed: str, asked: list[int], failed: list[int], t0: float) -> QueryResult:
        return QueryResult(
            question=question,
            answer=completed.strip(),
            state=QueryState.RUNNING,
            chunk_ids=asked,
            failed_chunk_ids=failed,
            superseded=True,
            latency_seconds=now_seconds() - t0,
        )
