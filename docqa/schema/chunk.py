"""Common schema for document chunks."""
from pydantic import BaseModel, ConfigDict


class Chunk(BaseModel):
    """Fixed-size slice of a document's words. id is the position in document order."""
    model_config = ConfigDict(frozen=True)

    id: int
    text: str

    @property
    def word_count(self) -> int:
        return len(self.text.split(" ")) if self.text else 0
