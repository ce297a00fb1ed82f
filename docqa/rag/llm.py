"""Generation collaborators: prompt -> async stream of text tokens (OpenAI or any async callable)."""
from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import AsyncIterator, Callable

from docqa.errors import GenerationUnavailableError
from .prompt import Prompt


class BaseGenerator(ABC):
    """Lazy, finite, non-restartable token stream per prompt. May raise at any point while streaming."""

    name: str = "generator"

    @abstractmethod
    def stream(self, prompt: Prompt) -> AsyncIterator[str]:
        ...


class CallableGenerator(BaseGenerator):
    """Wrap an async-generator function `fn(prompt) -> AsyncIterator[str]`."""

    name = "callable"

    def __init__(self, fn: Callable[[Prompt], AsyncIterator[str]]) -> None:
        self._fn = fn

    def stream(self, prompt: Prompt) -> AsyncIterator[str]:
        return self._fn(prompt)


class OpenAIGenerator(BaseGenerator):
    """Chat Completions with stream=True; yields each non-empty content delta."""

    name = "openai"

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        top_p: float = 0.9,
        max_tokens: int = 512,
        seed: int | None = 42,
        api_key: str | None = None,
        client=None,
    ) -> None:
        if client is None:
            from openai import AsyncOpenAI
            client = AsyncOpenAI(api_key=api_key)
        self.client = client
        self.model = model
        self.temperature = temperature
        self.top_p = top_p
        self.max_tokens = max_tokens
        self.seed = seed

    async def stream(self, prompt: Prompt) -> AsyncIterator[str]:
        kwargs = dict(
            model=self.model,
            messages=prompt.as_messages(),
            temperature=self.temperature,
            top_p=self.top_p,
            max_tokens=self.max_tokens,
            stream=True,
        )
        if self.seed is not None:
            kwargs["seed"] = self.seed
        resp = await self.client.chat.completions.create(**kwargs)
        # closing releases the HTTP connection when the consumer stops early
        async with resp:
            async for event in resp:
                if not event.choices:
                    continue
                token = event.choices[0].delta.content
                if token:
                    yield token


def openai_generator_from_settings() -> OpenAIGenerator:
    """Build the OpenAI generator from config.settings. Requires OPENAI_API_KEY."""
    from config import settings

    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key:
        raise GenerationUnavailableError("OPENAI_API_KEY is not set")
    return OpenAIGenerator(
        model=settings.OPENAI_MODEL,
        temperature=settings.LLM_TEMPERATURE,
        top_p=settings.LLM_TOP_P,
        max_tokens=settings.LLM_MAX_TOKENS,
        seed=settings.LLM_SEED,
        api_key=api_key,
    )
