"""Command-line interface for docsync.

Usage:
    docsync sync [--dry-run] [--check]
    docsync examples list
    docsync examples render <identifier>
    docsync excerpt
"""

import argparse
import sys
from pathlib import Path

from docsync_engine.cli.examples import cmd_examples_list, cmd_examples_render
from docsync_engine.cli.sync import cmd_excerpt, cmd_sync
from docsync_engine.config import SyncConfig, load_config
from docsync_engine.errors import DocSyncError
from docsync_engine.paths import manifest_path, project_root


def _resolve_project(args: argparse.Namespace) -> tuple[Path, SyncConfig]:
    """Resolve project root and configuration from args or environment."""
    root = project_root(getattr(args, "root", None))
    config = load_config(manifest_path(root, getattr(args, "config", None)))
    return root, config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsync",
        description="Sync README examples and library docs from example programs",
    )
    parser.add_argument(
        "--root", default=None,
        help="Project root directory (default: $DOCSYNC_ROOT or cwd)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to docsync.yaml (default: <root>/docsync.yaml)",
    )
    sub = parser.add_subparsers(dest="command")

    # sync
    syn = sub.add_parser("sync", help="Update README examples and lib header")
    syn.add_argument(
        "--dry-run", action="store_true",
        help="Preview changes without writing",
    )
    syn.add_argument(
        "--check", action="store_true",
        help="Exit 1 if any document is out of date (implies --dry-run)",
    )

    # examples
    ex = sub.add_parser("examples", help="Example program operations")
    ex_sub = ex.add_subparsers(dest="subcommand")
    ex_sub.add_parser("list", help="List examples in rendering order")
    rnd = ex_sub.add_parser("render", help="Print one rendered example")
    rnd.add_argument("identifier", help="Example path, e.g. examples/foo.rs")

    # excerpt
    sub.add_parser("excerpt", help="Print the header excerpt taken from the README")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("sync", ""): cmd_sync,
        ("excerpt", ""): cmd_excerpt,
        ("examples", "list"): cmd_examples_list,
        ("examples", "render"): cmd_examples_render,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if not handler:
        parser.parse_args([args.command, "--help"])
        return 0

    try:
        return handler(args)
    except DocSyncError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
