"""IdeaNest: evaluate startup ideas against a remote LLM service with offline fallback."""

__version__ = "0.1.0"
