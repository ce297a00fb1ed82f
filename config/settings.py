"""Load settings from env and config files."""
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
# Always load .env from project root so OPENAI_API_KEY is found no matter where you run from
load_dotenv(dotenv_path=str(PROJECT_ROOT / ".env"), encoding="utf-8")
DATA_RAW = Path(os.getenv("DATA_RAW", str(PROJECT_ROOT / "data" / "raw")))
LOG_DIR = Path(os.getenv("LOG_DIR", str(PROJECT_ROOT / "data" / "processed" / "logs")))

CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "150"))  # smaller chunks keep each prompt inside the model context
# Unset / empty -> every chunk is asked (full scan). An integer K -> only the K best-ranked chunks.
RETRIEVAL_TOP_K = int(os.getenv("RETRIEVAL_TOP_K")) if (os.getenv("RETRIEVAL_TOP_K") or "").strip() else None

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_TOP_P = float(os.getenv("LLM_TOP_P", "0.9"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "512"))
LLM_SEED = int(os.getenv("LLM_SEED", "42"))
SYSTEM_PROMPT = os.getenv(
    "SYSTEM_PROMPT",
    "You are a helpful assistant that extracts structured information from text.",
)
