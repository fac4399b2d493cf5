"""Counter contract with owner-only reset, JSON messages and dict-backed storage."""

__version__ = "0.1.0"