from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from tree_snapshot.config import READ_ERROR_CONTENT, FileNode, FolderNode, Node, ScanOptions
from tree_snapshot.logging import logger
from tree_snapshot.pattern_matcher import matches_any

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence


def relative_posix_path(path: Path, root: Path) -> str:
    """Return the path of `path` relative to `root`, in "./a/b" form.

    Args:
        path (Path): the entry to "relativise"
        root (Path): the scan root

    Returns:
        str: "." for the root itself, otherwise "./" followed by the
            "/"-separated path from root, whatever the host separator is.
    """
    rel = path.relative_to(root)
    if not rel.parts:
        return "."
    return "./" + "/".join(rel.parts)


def is_included(name: str, include_specs: Collection[str], *, case_sensitive: bool = False) -> bool:
    """Check if a file qualifies for capture by exact name or dotted extension.

    Args:
        name (str): the bare file name
        include_specs (Collection[str]): names (e.g. "Dockerfile") and extensions (e.g. ".py")
        case_sensitive (bool, optional): compare case-sensitively. Defaults to False.

    Returns:
        bool: True if the name or its extension appears in `include_specs`
    """
    suffix = Path(name).suffix
    if case_sensitive:
        return name in include_specs or (bool(suffix) and suffix in include_specs)
    specs = {spec.lower() for spec in include_specs}
    return name.lower() in specs or (bool(suffix) and suffix.lower() in specs)


def read_text_content(path: Path) -> str:
    """Read a whole file as UTF-8 text.

    The file is opened, fully read and closed before returning. A leading
    byte-order mark is dropped.

    Args:
        path (Path): the file to read

    Raises:
        OSError: if the file cannot be opened or read
        UnicodeDecodeError: if the bytes are not valid UTF-8

    Returns:
        str: the decoded text
    """
    with path.open("rb") as f:
        data = f.read()
    return data.decode("utf-8-sig")


def read_file_content(path: Path) -> str:
    """Read a file's text, substituting the read-error sentinel on failure.

    Args:
        path (Path): the file to read

    Returns:
        str: the decoded text, or READ_ERROR_CONTENT if it could not be read
    """
    try:
        return read_text_content(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read file %s: %s", path, e)
        return READ_ERROR_CONTENT


def walk(
    absolute_path: Path,
    current_depth: int,
    max_depth: int,
    include_specs: Collection[str],
    exclude_patterns: Sequence[str],
    *,
    root: Path | None = None,
    case_sensitive: bool = False,
) -> list[Node]:
    """Recursively capture the entries of a directory.

    The directory at `current_depth` is listed only if `current_depth <= max_depth`.
    Its subfolders are walked at `current_depth + 1`, so a folder sitting at exactly
    `max_depth` is listed but its subfolders come back with no children.

    Entries are visited in the order the filesystem lists them. An entry whose bare
    name matches any exclusion pattern is skipped entirely; files must then also
    match an inclusion spec. Symbolic links to directories are not followed.

    Nothing raised by the filesystem escapes: an unlistable directory yields an
    empty list and an unreadable file gets the read-error sentinel, each with a
    warning.

    Args:
        absolute_path (Path): the directory to list
        current_depth (int): depth of `absolute_path`, the root being 1
        max_depth (int): deepest level that is still listed
        include_specs (Collection[str]): file names and dotted extensions to capture
        exclude_patterns (Sequence[str]): wildcard patterns for names to skip
        root (Path | None, optional): the scan root for relative paths. Defaults to `absolute_path`.
        case_sensitive (bool, optional): compare names case-sensitively. Defaults to False.

    Returns:
        list[Node]: the captured children of `absolute_path`
    """
    if current_depth > max_depth:
        return []
    root = absolute_path if root is None else root

    try:
        with os.scandir(absolute_path) as it:
            entries = list(it)
    except OSError as e:
        logger.warning("Could not list directory %s: %s", absolute_path, e)
        return []

    nodes: list[Node] = []
    for entry in entries:
        entry_path = Path(entry.path)
        pattern = matches_any(entry.name, exclude_patterns, case_sensitive=case_sensitive)
        if pattern is not None:
            logger.debug("Excluded %s (pattern %r)", entry_path, pattern)
            continue

        if entry.is_dir(follow_symlinks=False):
            logger.debug("Descending into %s at depth %d", entry_path, current_depth + 1)
            children = walk(
                entry_path,
                current_depth + 1,
                max_depth,
                include_specs,
                exclude_patterns,
                root=root,
                case_sensitive=case_sensitive,
            )
            nodes.append(
                FolderNode(
                    name=entry.name,
                    path=relative_posix_path(entry_path, root),
                    children=tuple(children),
                ),
            )
        elif entry.is_file():
            if not is_included(entry.name, include_specs, case_sensitive=case_sensitive):
                logger.debug("Not included %s", entry_path)
                continue
            logger.debug("Capturing %s", entry_path)
            nodes.append(
                FileNode(
                    name=entry.name,
                    path=relative_posix_path(entry_path, root),
                    content=read_file_content(entry_path),
                ),
            )
        else:
            logger.debug("Skipping special entry %s", entry_path)
    return nodes


def scan(root: Path, options: ScanOptions) -> FolderNode:
    """Capture the whole tree under `root` as a single folder node.

    Args:
        root (Path): the scan root, an existing directory
        options (ScanOptions): the immutable walk configuration

    Returns:
        FolderNode: the root node, named after `root`, with path "."
    """
    root = root.resolve()
    children = walk(
        root,
        1,
        options.max_depth,
        options.include_specs,
        options.exclude_patterns,
        root=root,
        case_sensitive=options.case_sensitive,
    )
    return FolderNode(name=root.name or str(root), path=relative_posix_path(root, root), children=tuple(children))
