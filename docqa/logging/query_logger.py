"""Log index builds and answered queries (JSONL) for later inspection."""
import json
import time
from pathlib import Path
from datetime import datetime, timezone

from docqa.schema import QueryResult

# Default log dir when none provided (use config.settings in callers)
_DEFAULT_LOG_DIR: Path | None = None


def set_default_log_dir(path: Path | None) -> None:
    global _DEFAULT_LOG_DIR
    _DEFAULT_LOG_DIR = path


def _append(log_dir: Path | None, filename: str, record: dict) -> Path | None:
    dir_path = log_dir or _DEFAULT_LOG_DIR
    if not dir_path:
        return None
    dir_path = Path(dir_path)
    dir_path.mkdir(parents=True, exist_ok=True)
    log_file = dir_path / filename
    record["ts_utc"] = datetime.now(timezone.utc).isoformat()
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
    return log_file


def log_index_build(
    source: str,
    chunk_count: int,
    term_count: int,
    latency_seconds: float,
    log_dir: Path | None = None,
) -> Path | None:
    """Append one row per indexed document to index_log.jsonl."""
    return _append(log_dir, "index_log.jsonl", {
        "source": source,
        "chunk_count": chunk_count,
        "term_count": term_count,
        "latency_seconds": round(latency_seconds, 4),
    })


def log_query(
    result: QueryResult,
    log_dir: Path | None = None,
    query_id: str | None = None,
) -> Path | None:
    """Append one row per finished question to query_log.jsonl."""
    return _append(log_dir, "query_log.jsonl", {
        "question": result.question,
        "query_id": query_id,
        "answer": result.answer,
        "state": result.state.value,
        "chunk_ids": result.chunk_ids,
        "failed_chunk_ids": result.failed_chunk_ids,
        "superseded": result.superseded,
        "latency_seconds": round(result.latency_seconds, 4),
    })


def now_seconds() -> float:
    return time.perf_counter()
