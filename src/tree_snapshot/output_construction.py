from __future__ import annotations

import io
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tree_snapshot import __version__
from tree_snapshot.config import DEFAULT_EXCLUDES, GITIGNORE_NAME, FileNode, FolderNode, ScanOptions
from tree_snapshot.ignore_rules import load_ignore_file
from tree_snapshot.logging import logger
from tree_snapshot.tree_walker import scan
from tree_snapshot.yaml_document import quote, serialize

if TYPE_CHECKING:
    from tree_snapshot.config import Node
    from tree_snapshot.settings import Settings


def now_iso() -> str:
    """Return the current date and time in ISO 8601 format with timezone.

    Returns:
        str: the current date and time in ISO 8601 format with timezone
    """
    return datetime.now(UTC).astimezone().isoformat(timespec="seconds")


def build_exclusions(settings: Settings) -> tuple[str, ...]:
    """Assemble the exclusion patterns for a run.

    Built-in patterns come first (unless disabled), then the explicit ones, then
    whatever the ignore file(s) provide. Ignore-file patterns only ever add to
    the list.

    Args:
        settings (Settings): the run configuration

    Returns:
        tuple[str, ...]: the patterns, without duplicates, in first-seen order
    """
    patterns: list[str] = []
    if not settings.no_default_excludes:
        patterns.extend(sorted(DEFAULT_EXCLUDES))
    patterns.extend(settings.exclude)
    if settings.gitignore:
        patterns.extend(load_ignore_file(settings.root / GITIGNORE_NAME))
    if settings.ignore_file is not None:
        patterns.extend(load_ignore_file(settings.ignore_file))
    return tuple(dict.fromkeys(patterns))


def build_scan_options(settings: Settings) -> ScanOptions:
    """Freeze the walk configuration once, before the walk starts.

    Args:
        settings (Settings): the run configuration

    Returns:
        ScanOptions: the immutable options threaded through the walk
    """
    return ScanOptions(
        include_specs=frozenset(settings.include),
        exclude_patterns=build_exclusions(settings),
        max_depth=settings.max_depth,
        case_sensitive=settings.case_sensitive,
    )


def count_nodes(node: Node) -> tuple[int, int]:
    """Count files and folders in a tree, the given node included.

    Args:
        node (Node): the tree to count

    Returns:
        tuple[int, int]: the number of files and of folders
    """
    if isinstance(node, FileNode):
        return 1, 0
    files, folders = 0, 1
    for child in node.children:
        f, d = count_nodes(child)
        files += f
        folders += d
    return files, folders


def render_document(root: FolderNode, *, root_label: str) -> str:
    """Render a captured tree with a short comment header.

    Args:
        root (FolderNode): the captured root folder
        root_label (str): how the scanned root is named in the header, written as a quoted scalar

    Returns:
        str: the complete YAML document
    """
    out = io.StringIO()
    out.write(f"# Project snapshot (tree-snapshot {__version__})\n")
    out.write(f"# root: {quote(root_label)}\n")
    out.write(f"# generated_at: {now_iso()}\n")
    out.write(serialize([root], 0))
    return out.getvalue()


def build_document(settings: Settings) -> tuple[str, FolderNode]:
    """Scan the configured root and render the snapshot document in memory.

    Args:
        settings (Settings): the run configuration

    Returns:
        tuple[str, FolderNode]: the YAML document and the captured tree
    """
    root = settings.root.resolve()
    options = build_scan_options(settings)
    logger.debug(
        "Scanning %s (max_depth=%d, %d include spec(s), %d exclusion pattern(s))",
        root,
        options.max_depth,
        len(options.include_specs),
        len(options.exclude_patterns),
    )
    tree = scan(root, options)
    return render_document(tree, root_label=str(root)), tree
