"""Rules engine and AI opponents for 1v1 monster duels."""

__version__ = "0.1.0"
