"""Persisted state — the immutable snapshot model and its file store."""
