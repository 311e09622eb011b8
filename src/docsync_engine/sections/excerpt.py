"""Extract a prose excerpt from one document for use as a comment header."""

from __future__ import annotations

import re

from docsync_engine.text import split_lines

COMMENT_PREFIX = "//! "
BULLET_PREFIX = "* "


def _to_comment(line: str, comment_prefix: str, bullet_prefix: str) -> str:
    if line.startswith(bullet_prefix):
        line = line[len(bullet_prefix):]
    return (comment_prefix + line.rstrip("\r")).rstrip(" \t")


def extract_excerpt(
    doc: str,
    start_pattern: str,
    end_pattern: str,
    comment_prefix: str = COMMENT_PREFIX,
    bullet_prefix: str = BULLET_PREFIX,
) -> list[str]:
    """Pull the prose between two line patterns and turn it into comments.

    Lines from the first ``start_pattern`` match up to the first later
    ``end_pattern`` match are kept. A leading bullet is swapped for the
    comment prefix, other lines get the prefix prepended.

    Returns:
        Comment lines without newlines, or an empty list if either
        pattern is not found.
    """
    lines = split_lines(doc)
    start_re = re.compile(start_pattern)
    end_re = re.compile(end_pattern)

    start = next((i for i, line in enumerate(lines) if start_re.match(line)), None)
    if start is None:
        return []

    end = next(
        (i for i in range(start + 1, len(lines)) if end_re.match(lines[i])),
        None,
    )
    if end is None:
        return []

    return [_to_comment(line, comment_prefix, bullet_prefix) for line in lines[start:end]]


def excerpt_text(lines: list[str]) -> str:
    """Join excerpt lines into header text with a trailing newline."""
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
