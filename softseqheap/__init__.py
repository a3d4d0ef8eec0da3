"""Soft sequence heaps, with selection, chunked building and near-sorting built on them."""

__version__ = "0.1.0"

__all__ = ["build", "chazelle", "circular", "cli", "heap", "selection", "sequence", "witnesses"]