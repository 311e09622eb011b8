"""Project path resolution.

Resolves the project root and the manifest location. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    DOCSYNC_ROOT: project root (default: current directory)
    DOCSYNC_CONFIG: manifest path (default: <root>/docsync.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

MANIFEST_NAME = "docsync.yaml"


def project_root(raw: Path | str | None = None) -> Path:
    """Return the project root directory."""
    if raw:
        return Path(raw).expanduser().resolve()
    env = os.environ.get("DOCSYNC_ROOT")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()


def manifest_path(root: Path, raw: Path | str | None = None) -> Path:
    """Return the path to docsync.yaml."""
    if raw:
        return Path(raw).expanduser()
    env = os.environ.get("DOCSYNC_CONFIG")
    if env:
        return Path(env).expanduser()
    return root / MANIFEST_NAME
