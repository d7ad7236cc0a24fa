"""Familiar string and value helpers: characters, trimming, comparison, search, formatting and value checks."""

__version__ = "0.1.0"
__all__ = ["chars", "trimming", "compare", "search", "formatting", "variables"]