"""
tree_snapshot — Capture a project directory as one YAML document.

Overview
--------
Walks a directory tree, keeps the files whose name or extension is listed in
the include specs, skips every file or folder whose bare name matches an
exclusion pattern, and writes a single YAML document mirroring the tree with
each captured file embedded as a literal block.

Exclusions come from a built-in list, from `--exclude`, and optionally from an
ignore file (`--ignore-file`, or `--gitignore` for `<root>/.gitignore`). Ignore
files are read as bare-name patterns only: negation and path-scoped rules are
not interpreted.

Usage
-----
Run `tree-snapshot --help` for full options. Common examples:
    - Snapshot the current directory to stdout:
        tree-snapshot

    - Only Python sources and the Dockerfile, three levels deep:
        tree-snapshot --include .py --include Dockerfile --max-depth 3 --output snap.yaml

    - Honor the project's .gitignore and log decisions to a file:
        tree-snapshot --gitignore --verbose --log-file snapshot.log --output snap.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from tree_snapshot import __version__
from tree_snapshot.exceptions import OutputExistsError, RootNotFoundError, TreeSnapshotError
from tree_snapshot.logging import logger, setup_logging
from tree_snapshot.output_construction import build_document, count_nodes
from tree_snapshot.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    p = argparse.ArgumentParser(
        prog="tree-snapshot",
        description="Capture a directory tree and its text files as one YAML document.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--root", type=Path, default=Path("."), help="Directory to scan.")
    p.add_argument("--output", type=Path, default=None, help="Output file (stdout when omitted).")
    p.add_argument(
        "--include",
        action="append",
        default=None,
        help="File name or dotted extension to capture (repeatable, replaces the defaults).",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Wildcard pattern for names to skip (repeatable, added to the defaults).",
    )
    p.add_argument(
        "--no-default-excludes",
        action="store_true",
        help="Do not apply the built-in exclusion patterns.",
    )
    p.add_argument("--max-depth", type=int, default=None, help="Folder levels to scan, root = 1.")
    p.add_argument("--ignore-file", type=Path, default=None, help="Ignore file adding exclusions.")
    p.add_argument("--gitignore", action="store_true", help="Add patterns from <root>/.gitignore.")
    p.add_argument("--case-sensitive", action="store_true", help="Match names case-sensitively.")
    p.add_argument("--force", action="store_true", help="Overwrite an existing output file.")
    p.add_argument("--log-file", type=str, default="", help="Log file path.")
    p.add_argument("--verbose", "-v", action="store_true", help="Log per-entry decisions.")
    args = p.parse_args(argv)
    if args.max_depth is not None and args.max_depth < 1:
        p.error("--max-depth must be a positive integer")
    return Settings(**{k: v for k, v in vars(args).items() if v is not None})


def check_paths(settings: Settings) -> None:
    """Validate the root and output paths before scanning.

    Args:
        settings (Settings): the run configuration

    Raises:
        RootNotFoundError: if the root is missing or not a directory
        OutputExistsError: if the output exists and `force` is not set
    """
    if not settings.root.is_dir():
        raise RootNotFoundError(root=settings.root)
    if settings.output is not None and settings.output.exists() and not settings.force:
        raise OutputExistsError(output=settings.output)


def write_output(text: str, settings: Settings) -> None:
    """Hand the finished document to its destination in one go.

    Args:
        text (str): the complete document
        settings (Settings): the run configuration
    """
    if settings.output is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    settings.output.parent.mkdir(parents=True, exist_ok=True)
    settings.output.write_text(text, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    settings = parse_args(argv)
    if settings.log_file or settings.verbose:
        setup_logging(settings.log_file or None, verbose=settings.verbose, force=True)

    try:
        check_paths(settings)
    except TreeSnapshotError as e:
        logger.error("%s", e)
        return 1

    document, tree = build_document(settings)
    write_output(document, settings)

    files, folders = count_nodes(tree)
    target = settings.output if settings.output is not None else "<stdout>"
    print(f"Wrote {target} files={files} folders={folders}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
