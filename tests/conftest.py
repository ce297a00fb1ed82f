"""Pytest fixtures: sample documents, chunk sets, scripted generators."""
import asyncio
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from docqa.rag.llm import BaseGenerator


class ScriptedGenerator(BaseGenerator):
    """Replays one script per stream() call: a list of tokens (an Exception item raises there) or an Exception."""

    name = "scripted"

    def __init__(self, scripts) -> None:
        self.scripts = list(scripts)
        self.prompts = []

    async def stream(self, prompt):
        i = len(self.prompts)
        self.prompts.append(prompt)
        script = self.scripts[i] if i < len(self.scripts) else []
        if isinstance(script, Exception):
            raise script
        for token in script:
            await asyncio.sleep(0)
            if isinstance(token, Exception):
                raise token
            yield token


@pytest.fixture
def scripted_generator():
    return ScriptedGenerator


@pytest.fixture
def sample_text() -> str:
    return (
        "Cats are small carnivorous mammals.\nThey are kept as pets\n\n"
        "The refund policy allows a full refund within 30 days.\n\n"
        "Contact support for help with billing."
    )


@pytest.fixture
def sample_question() -> str:
    return "What is the refund policy?"
