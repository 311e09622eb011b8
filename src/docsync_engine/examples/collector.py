"""Collect example programs in display order."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from docsync_engine.config import ExamplesConfig
from docsync_engine.errors import MissingSourceError


@dataclass(frozen=True)
class ExampleSource:
    """One example program: project-relative identifier plus its text."""

    identifier: str
    text: str


def collect(priority: Iterable[str], scan: Iterable[str]) -> list[str]:
    """Order identifiers: priority entries first, then scanned ones.

    Later duplicates are dropped; the first occurrence keeps its slot.
    """
    seen: set[str] = set()
    ordered: list[str] = []
    for ident in [*priority, *scan]:
        if ident not in seen:
            seen.add(ident)
            ordered.append(ident)
    return ordered


def discover_examples(root: Path, directory: str, pattern: str) -> list[str]:
    """Find example files under root/directory matching pattern.

    Returns:
        Sorted list of root-relative POSIX identifiers.
    """
    example_dir = root / directory
    if not example_dir.is_dir():
        return []
    return sorted(
        p.relative_to(root).as_posix()
        for p in example_dir.glob(pattern)
        if p.is_file()
    )


def collect_examples(root: Path, config: ExamplesConfig) -> list[str]:
    """Build the ordered example list for a project.

    Raises:
        MissingSourceError: If a priority example does not exist and
            ``config.skip_missing`` is off.
    """
    priority: list[str] = []
    for name in config.priority:
        ident = (Path(config.directory) / name).as_posix()
        if not (root / ident).is_file():
            if not config.skip_missing:
                raise MissingSourceError(f"Priority example not found: {ident}")
            warnings.warn(f"Skipping missing priority example: {ident}")
            continue
        priority.append(ident)

    scanned = discover_examples(root, config.directory, config.pattern)
    return collect(priority, scanned)


def read_example(root: Path, identifier: str) -> ExampleSource:
    """Read one example program from disk."""
    path = root / identifier
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MissingSourceError(f"Cannot read example {identifier}: {e}") from e
    return ExampleSource(identifier=identifier, text=text)
