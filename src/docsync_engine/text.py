"""Line splitting on newline characters only.

``str.splitlines`` also breaks on form feeds, vertical tabs and the Unicode
line/paragraph separators, which may legitimately appear inside a line of
an example or a document.
"""

from __future__ import annotations

import re

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def split_lines(text: str, keepends: bool = False) -> list[str]:
    """Split text at newlines; a final newline adds no empty line."""
    if keepends:
        return _LINE.findall(text)
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
