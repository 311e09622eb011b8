"""Example program CLI commands."""

import argparse
from pathlib import Path

from docsync_engine.examples.collector import collect_examples, read_example
from docsync_engine.examples.renderer import render


def cmd_examples_list(args: argparse.Namespace) -> int:
    from docsync_engine.cli import _resolve_project

    root, config = _resolve_project(args)
    identifiers = collect_examples(root, config.examples)
    if not identifiers:
        print("No examples found.")
        return 0

    pinned = {
        (Path(config.examples.directory) / name).as_posix()
        for name in config.examples.priority
    }
    for i, ident in enumerate(identifiers, 1):
        marker = "*" if ident in pinned else " "
        print(f"  {i:>3} {marker} {ident}")
    print(f"\n  {len(identifiers)} example(s)")
    return 0


def cmd_examples_render(args: argparse.Namespace) -> int:
    from docsync_engine.cli import _resolve_project

    root, config = _resolve_project(args)
    ex = config.examples
    source = read_example(root, args.identifier)
    block = render(source, ex.language, entry_pattern=ex.entry_pattern, strict=ex.strict)
    print(block.text(), end="")
    return 0
