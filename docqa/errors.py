"""Error types raised at the boundaries of the indexing and answering flow."""


class DocQAError(Exception):
    """Base class for docqa errors."""


class ExtractionError(DocQAError):
    """Document text could not be obtained (missing, unsupported or unreadable file)."""


class GenerationUnavailableError(DocQAError):
    """No generation backend could be created (e.g. missing API key)."""


class ChunkGenerationError(DocQAError):
    """The generator failed while streaming the answer for one chunk."""

    def __init__(self, chunk_id: int, cause: BaseException) -> None:
        super().__init__(f"chunk {chunk_id}: {type(cause).__name__}: {cause}")
        self.chunk_id = chunk_id
        self.cause = cause
