from .query_logger import log_index_build, log_query, now_seconds, set_default_log_dir

__all__ = ["log_index_build", "log_query", "now_seconds", "set_default_log_dir"]
