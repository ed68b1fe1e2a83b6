"""Load exclusion patterns from a .gitignore-style file.

Only bare-name patterns are honored: a line is matched against file and folder
names, never against relative paths. Negation (`!pattern`) and directory-scoped
patterns such as `docs/build` are therefore not interpreted the way git does;
they are loaded as literal name patterns and simply rarely match.
"""

from __future__ import annotations

import os
from pathlib import Path

from tree_snapshot.exceptions import IgnoreFileError
from tree_snapshot.logging import logger


def normalize_ignore_line(line: str) -> str | None:
    """Turn one ignore-file line into an exclusion pattern.

    Args:
        line (str): a raw line from the ignore file

    Returns:
        str | None: the normalized pattern, or None for blank and comment lines
    """
    pattern = line.strip()
    if not pattern or pattern.startswith("#"):
        return None
    if pattern[-1] in "/\\":
        pattern = pattern[:-1]
    pattern = pattern.replace("/", os.sep)
    return pattern or None


def read_ignore_lines(path: Path) -> list[str]:
    """Read the raw lines of an ignore file.

    Args:
        path (Path): the ignore file

    Raises:
        IgnoreFileError: if the file cannot be read or is not valid UTF-8

    Returns:
        list[str]: the file's lines without line terminators
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(path=path, reason=str(e)) from e
    return text.splitlines()


def load_ignore_file(path: str | Path) -> list[str]:
    """Parse an ignore file into exclusion patterns, failing soft.

    A missing or unreadable file yields an empty list and a warning; the caller
    keeps its own exclusion list unchanged.

    Args:
        path (str | Path): the ignore file to read

    Returns:
        list[str]: the normalized exclusion patterns, in file order
    """
    ignore_path = Path(path)
    if not ignore_path.is_file():
        logger.warning("Ignore file not found, continuing without it: %s", ignore_path)
        return []
    try:
        lines = read_ignore_lines(ignore_path)
    except IgnoreFileError as e:
        logger.warning("Ignoring unreadable ignore file: %s", e)
        return []

    patterns: list[str] = []
    for line in lines:
        pattern = normalize_ignore_line(line)
        if pattern is None:
            continue
        patterns.append(pattern)
    logger.debug("Loaded %d pattern(s) from %s", len(patterns), ignore_path)
    return patterns
