"""Per-chunk prompt: fixed system instruction + question + chunk text."""
from pydantic import BaseModel, ConfigDict

DEFAULT_SYSTEM = "You are a helpful assistant that extracts structured information from text."


class Prompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    system: str
    user: str

    def as_messages(self) -> list[dict]:
        """Chat API message list."""
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def build_user_message(question: str, chunk_text: str) -> str:
    return f"{question}\n\nDocument:\n{chunk_text}"


def build_prompt(system: str, question: str, chunk_text: str) -> Prompt:
    """Pure: same inputs, same prompt."""
    return Prompt(system=system, user=build_user_message(question, chunk_text))
