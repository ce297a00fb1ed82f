from .aggregator import (
    NO_DOCUMENT_ANSWER,
    NO_GENERATOR_ANSWER,
    NOT_FOUND_ANSWER,
    QueryAggregator,
)
from .llm import BaseGenerator, CallableGenerator, OpenAIGenerator, openai_generator_from_settings
from .observer import BaseObserver, ChannelObserver, ConsoleObserver, MultiObserver, RecordingObserver
from .prompt import DEFAULT_SYSTEM, Prompt, build_prompt
from .session import DocumentQASession

__all__ = [
    "NO_DOCUMENT_ANSWER",
    "NO_GENERATOR_ANSWER",
    "NOT_FOUND_ANSWER",
    "QueryAggregator",
    "BaseGenerator",
    "CallableGenerator",
    "OpenAIGenerator",
    "openai_generator_from_settings",
    "BaseObserver",
    "ChannelObserver",
    "ConsoleObserver",
    "MultiObserver",
    "RecordingObserver",
    "DEFAULT_SYSTEM",
    "Prompt",
    "build_prompt",
    "DocumentQASession",
]
