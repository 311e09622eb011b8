"""Sync and excerpt CLI commands."""

import argparse


def cmd_sync(args: argparse.Namespace) -> int:
    from docsync_engine.cli import _resolve_project
    from docsync_engine.sync import sync_docs

    root, config = _resolve_project(args)
    dry_run = args.dry_run or args.check
    result = sync_docs(root, config, dry_run=dry_run)

    print("Documentation Sync Results")
    print("─" * 40)
    print(f"  Examples: {len(result.examples)}")
    for path, action in result.actions.items():
        print(f"  {path + ':':<24}{action}")

    if result.dry_run:
        print("\n[DRY RUN] No files were modified.")

    if args.check and result.changed:
        print("Documentation is out of date. Run 'docsync sync'.")
        return 1
    return 0


def cmd_excerpt(args: argparse.Namespace) -> int:
    from docsync_engine.cli import _resolve_project
    from docsync_engine.sections.excerpt import excerpt_text, extract_excerpt
    from docsync_engine.sync import read_document

    root, config = _resolve_project(args)
    doc = read_document(root / config.primary.path)
    lines = extract_excerpt(
        doc,
        config.primary.excerpt_start,
        config.primary.excerpt_end,
        comment_prefix=config.secondary.header_prefix,
    )
    if not lines:
        print(f"No excerpt found in {config.primary.path}")
        return 0
    print(excerpt_text(lines), end="")
    return 0
