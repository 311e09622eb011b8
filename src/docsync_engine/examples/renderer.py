"""Render example programs as fenced Markdown code blocks.

Only the body of the program's entry point is shown: the lines after the
entry-point line (``fn main`` by default) up to the first line that is a
lone ``}``. Both of those lines are dropped and the body is outdented by
one level.
"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass, field
from typing import Iterable

from docsync_engine.errors import UnterminatedExampleError
from docsync_engine.examples.collector import ExampleSource
from docsync_engine.text import split_lines

FENCE = "```"
INDENT = "    "
TERMINATOR = "}"
DEFAULT_ENTRY_PATTERN = "fn main"


@dataclass
class RenderedBlock:
    """Fenced block lines for one example, ending with a blank separator."""

    identifier: str
    lines: list[str] = field(default_factory=list)

    @property
    def body(self) -> list[str]:
        """Captured code lines, without fences and separator."""
        return self.lines[1:-2]

    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


def outdent(line: str) -> str:
    """Strip one indentation unit; shallower lines are returned as-is."""
    if line.startswith(INDENT):
        return line[len(INDENT):]
    return line


def render(
    source: ExampleSource,
    language: str,
    entry_pattern: str = DEFAULT_ENTRY_PATTERN,
    strict: bool = False,
) -> RenderedBlock:
    """Render one example into a fenced block.

    Args:
        source: The example program.
        language: Tag placed after the opening fence.
        entry_pattern: Regex matched at line start that opens the body.
        strict: Raise instead of warning when the body never closes.

    Returns:
        RenderedBlock with fence, body, fence and a blank line.

    Raises:
        UnterminatedExampleError: If ``strict`` and no closing line follows
            the entry point.
    """
    entry = re.compile(entry_pattern)
    captured: list[str] = []
    extracting = False
    done = False

    for line in split_lines(source.text):
        if extracting:
            if line == TERMINATOR:
                extracting = False
                done = True
                continue
            captured.append(outdent(line))
        elif not done and entry.match(line):
            extracting = True

    if extracting:
        msg = f"{source.identifier}: entry point has no closing '{TERMINATOR}' line"
        if strict:
            raise UnterminatedExampleError(msg)
        warnings.warn(f"{msg}; extracted to end of file")

    return RenderedBlock(
        identifier=source.identifier,
        lines=[FENCE + language, *captured, FENCE, ""],
    )


def render_all(
    sources: Iterable[ExampleSource],
    language: str,
    entry_pattern: str = DEFAULT_ENTRY_PATTERN,
    strict: bool = False,
) -> str:
    """Render every example in order and concatenate the blocks."""
    return "".join(
        render(s, language, entry_pattern=entry_pattern, strict=strict).text()
        for s in sources
    )
