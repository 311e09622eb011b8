"""Exceptions raised by the sync pipeline."""

from __future__ import annotations


class DocSyncError(Exception):
    """Base exception for documentation sync failures."""


class MissingSourceError(DocSyncError, FileNotFoundError):
    """An example program or a target document could not be read."""


class WriteFailureError(DocSyncError, OSError):
    """A target document could not be written."""


class ConfigurationError(DocSyncError, ValueError):
    """The docsync.yaml manifest is malformed."""


class UnterminatedExampleError(DocSyncError, ValueError):
    """An example's entry point never reaches its closing line."""


__all__ = [
    "DocSyncError",
    "MissingSourceError",
    "WriteFailureError",
    "ConfigurationError",
    "UnterminatedExampleError",
]
