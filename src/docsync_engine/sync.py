"""Documentation sync: renders examples into the README, copies prose into lib docs.

The sync process:
1. Collect example programs (priority list first, then directory scan)
2. Read every example and both documents in full
3. Render the examples and replace the README's examples section
4. Extract the crate description from the updated README
5. Replace the header comment block of the library entry file
6. Write whichever documents changed

Everything outside the anchored spans is left byte-for-byte intact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from docsync_engine.config import SyncConfig
from docsync_engine.errors import MissingSourceError, WriteFailureError
from docsync_engine.examples.collector import collect_examples, read_example
from docsync_engine.examples.renderer import render_all
from docsync_engine.sections.excerpt import excerpt_text, extract_excerpt
from docsync_engine.sections.splice import update_header, update_section


@dataclass
class SyncResult:
    """Result of a documentation sync run."""

    examples: list[str] = field(default_factory=list)
    actions: dict[str, str] = field(default_factory=dict)
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return any(action == "updated" for action in self.actions.values())


def read_document(path: Path) -> str:
    """Read a whole document, keeping its line endings as they are."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise MissingSourceError(f"Cannot read {path}: {e}") from e


def write_document(path: Path, content: str) -> None:
    """Overwrite a whole document without translating line endings."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise WriteFailureError(f"Cannot write {path}: {e}") from e


def build_examples_section(root: Path, config: SyncConfig) -> tuple[list[str], str]:
    """Collect and render all examples.

    Returns:
        (ordered example identifiers, concatenated rendered blocks)
    """
    ex = config.examples
    identifiers = collect_examples(root, ex)
    sources = [read_example(root, ident) for ident in identifiers]
    rendered = render_all(
        sources, ex.language, entry_pattern=ex.entry_pattern, strict=ex.strict,
    )
    return identifiers, rendered


def sync_docs(root: Path | str, config: SyncConfig | None = None, dry_run: bool = False) -> SyncResult:
    """Run the full pipeline against a project.

    Args:
        root: Project root; document and example paths are relative to it.
        config: Sync configuration. Defaults to SyncConfig().
        dry_run: If True, compute changes without writing files.

    Returns:
        SyncResult with the example order and an action per document
        ("updated", "unchanged" or "skipped").

    Raises:
        MissingSourceError: If an example or document cannot be read.
        WriteFailureError: If a document cannot be written.
    """
    cfg = config or SyncConfig()
    root = Path(root)
    primary_path = root / cfg.primary.path
    secondary_path = root / cfg.secondary.path

    identifiers, rendered = build_examples_section(root, cfg)
    primary = read_document(primary_path)
    secondary = read_document(secondary_path)

    result = SyncResult(examples=identifiers, dry_run=dry_run)

    anchor = cfg.primary.anchor
    new_primary = update_section(primary, anchor.start, anchor.end, rendered)

    excerpt = extract_excerpt(
        new_primary,
        cfg.primary.excerpt_start,
        cfg.primary.excerpt_end,
        comment_prefix=cfg.secondary.header_prefix,
    )
    if excerpt:
        new_secondary = update_header(secondary, cfg.secondary.header_prefix, excerpt_text(excerpt))
    else:
        new_secondary = None

    # No rollback: a failure on the second write leaves the first in place
    for key, path, old, new in (
        (cfg.primary.path, primary_path, primary, new_primary),
        (cfg.secondary.path, secondary_path, secondary, new_secondary),
    ):
        if new is None:
            result.actions[key] = "skipped"
        elif new == old:
            result.actions[key] = "unchanged"
        else:
            if not dry_run:
                write_document(path, new)
            result.actions[key] = "updated"

    return result
