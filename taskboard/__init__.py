"""Task list backend with an append-only history of every change."""

__version__ = "0.1.0"
