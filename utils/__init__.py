"""Shared helpers: the Result type and heap-based selection."""
