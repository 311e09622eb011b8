"""Splice replacement text into anchored spans of a document.

Both updaters return the document unchanged when their anchors are
missing. Matching is always against the current content, so applying the
same replacement twice gives the same text.
"""

from __future__ import annotations

import re

from docsync_engine.text import split_lines


def update_section(doc: str, start_marker: str, end_marker_line: str, replacement: str) -> str:
    """Replace the span between a heading and an end-marker line.

    The span starts after the first ``start_marker`` line and the single
    blank line following it, and runs up to (not including) the first
    later line that is exactly ``end_marker_line``.
    """
    start = re.search(rf"^{re.escape(start_marker)}\n\n", doc, flags=re.MULTILINE)
    if not start:
        return doc

    end_pattern = re.compile(rf"^{re.escape(end_marker_line)}$", flags=re.MULTILINE)
    end = end_pattern.search(doc, start.end())
    if not end:
        return doc

    return doc[:start.end()] + replacement + doc[end.start():]


def _in_header(line: str, prefix: str) -> bool:
    # Blank comment lines lose their trailing space ("//! " -> "//!")
    bare = prefix.rstrip()
    return line.startswith(prefix) or (bool(bare) and line.rstrip() == bare)


def update_header(doc: str, header_prefix: str, replacement: str) -> str:
    """Replace the first run of ``header_prefix`` lines with ``replacement``.

    The first line after the run is kept as the boundary.
    """
    lines = split_lines(doc, keepends=True)

    first = next(
        (i for i, line in enumerate(lines) if _in_header(line, header_prefix)),
        None,
    )
    if first is None:
        return doc

    last = first
    while last < len(lines) and _in_header(lines[last], header_prefix):
        last += 1

    return "".join(lines[:first]) + replacement + "".join(lines[last:])
