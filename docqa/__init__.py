"""docqa: streamed question answering over a single document (chunk, TF-IDF index, per-chunk LLM answers)."""
