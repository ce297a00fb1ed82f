"""Document -> text blob. PDF pages (PyMuPDF) or plain text files."""
from __future__ import annotations

import logging
from pathlib import Path

from docqa.errors import ExtractionError

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".txt", ".md", ".text"}
PAGE_SEPARATOR = "\n\n"


def join_pages(pages: list[str]) -> str:
    """Every page followed by a blank-line separator."""
    return "".join(page + PAGE_SEPARATOR for page in pages)


def resolve_document(path: Path | str, base_dir: Path | None = None) -> Path:
    """A relative path missing from the working directory is looked up under base_dir (DATA_RAW)."""
    path = Path(path)
    if path.exists() or path.is_absolute() or base_dir is None:
        return path
    candidate = Path(base_dir) / path
    return candidate if candidate.exists() else path


def extract_pdf_pages(path: Path) -> list[str]:
    import fitz  # PyMuPDF

    try:
        doc = fitz.open(str(path))
    except Exception as e:
        raise ExtractionError(f"cannot open PDF {path}: {e}") from e
    try:
        return [doc[i].get_text("text") for i in range(len(doc))]
    except Exception as e:
        raise ExtractionError(f"cannot read PDF {path}: {e}") from e
    finally:
        doc.close()


def extract_text(path: Path | str) -> str:
    """Extract the whole document as one UTF-8 blob. Raises ExtractionError."""
    path = Path(path)
    if not path.exists():
        raise ExtractionError(f"document not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        text = join_pages(extract_pdf_pages(path))
    elif suffix in TEXT_SUFFIXES:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(f"cannot read {path}: {e}") from e
    else:
        raise ExtractionError(f"unsupported document type: {suffix or path.name}")
    logger.info("Extracted document length: %d", len(text))
    return text
