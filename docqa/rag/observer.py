"""Observer sinks: indexing / model-loading flags, answer updates, diagnostic log lines."""
from __future__ import annotations

import asyncio
import sys
from abc import ABC, abstractmethod
from typing import AsyncIterator, Literal

from pydantic import BaseModel

EventKind = Literal["indexing", "loading_model", "answer", "log"]


class ObserverEvent(BaseModel):
    kind: EventKind
    value: bool | str


class BaseObserver(ABC):
    """Notification only: the core never reads state back from an observer."""

    @abstractmethod
    def set_indexing(self, active: bool) -> None:
        ...

    @abstractmethod
    def set_loading_model(self, active: bool) -> None:
        ...

    @abstractmethod
    def set_answer(self, text: str) -> None:
        ...

    @abstractmethod
    def log(self, line: str) -> None:
        ...


class RecordingObserver(BaseObserver):
    """Keeps every update in memory; current state plus full history."""

    def __init__(self) -> None:
        self.is_indexing = False
        self.is_loading_model = False
        self.answer = ""
        self.answers: list[str] = []
        self.log_lines: list[str] = []
        self.events: list[ObserverEvent] = []

    @property
    def logs(self) -> str:
        return "".join(line + "\n" for line in self.log_lines)

    def set_indexing(self, active: bool) -> None:
        self.is_indexing = active
        self.events.append(ObserverEvent(kind="indexing", value=active))

    def set_loading_model(self, active: bool) -> None:
        self.is_loading_model = active
        self.events.append(ObserverEvent(kind="loading_model", value=active))

    def set_answer(self, text: str) -> None:
        self.answer = text
        self.answers.append(text)
        self.events.append(ObserverEvent(kind="answer", value=text))

    def log(self, line: str) -> None:
        self.log_lines.append(line)
        self.events.append(ObserverEvent(kind="log", value=line))


class ChannelObserver(BaseObserver):
    """Pushes events into an unbounded asyncio.Queue; `events()` yields them in publish order until `close()`."""

    def __init__(self) -> None:
        self.queue: asyncio.Queue[ObserverEvent | None] = asyncio.Queue()

    def _put(self, event: ObserverEvent | None) -> None:
        self.queue.put_nowait(event)

    def set_indexing(self, active: bool) -> None:
        self._put(ObserverEvent(kind="indexing", value=active))

    def set_loading_model(self, active: bool) -> None:
        self._put(ObserverEvent(kind="loading_model", value=active))

    def set_answer(self, text: str) -> None:
        self._put(ObserverEvent(kind="answer", value=text))

    def log(self, line: str) -> None:
        self._put(ObserverEvent(kind="log", value=line))

    def close(self) -> None:
        self._put(None)

    async def events(self) -> AsyncIterator[ObserverEvent]:
        while True:
            event = await self.queue.get()
            if event is None:
                return
            yield event


class MultiObserver(BaseObserver):
    """Fan out every notification to several observers."""

    def __init__(self, *observers: BaseObserver) -> None:
        self.observers = list(observers)

    def set_indexing(self, active: bool) -> None:
        for o in self.observers:
            o.set_indexing(active)

    def set_loading_model(self, active: bool) -> None:
        for o in self.observers:
            o.set_loading_model(active)

    def set_answer(self, text: str) -> None:
        for o in self.observers:
            o.set_answer(text)

    def log(self, line: str) -> None:
        for o in self.observers:
            o.log(line)


class ConsoleObserver(BaseObserver):
    """CLI sink: log lines on stderr, answer streamed to stdout (only the new suffix when text grows)."""

    def __init__(self, out=None, err=None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self._shown = ""

    def set_indexing(self, active: bool) -> None:
        if active:
            print("Indexing document...", file=self.err)

    def set_loading_model(self, active: bool) -> None:
        if active:
            print("Loading model...", file=self.err)

    def set_answer(self, text: str) -> None:
        if text.startswith(self._shown):
            self.out.write(text[len(self._shown):])
        else:
            # chunk boundary or final trim: redraw
            self.out.write("\n" + text)
        self.out.flush()
        self._shown = text

    def log(self, line: str) -> None:
        print(line, file=self.err)
