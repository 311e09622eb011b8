"""docsync-engine: keep README examples and library docs in sync with example programs."""

__version__ = "0.1.0"
