from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@lru_cache(maxsize=512)
def _compile(pattern: str, *, case_sensitive: bool) -> re.Pattern[str]:
    """Translate a wildcard pattern into an anchored regular expression.

    Only `*` (any run of characters, possibly empty) and `?` (exactly one character)
    are special. Everything else, `[` and `]` included, matches literally, so any
    string is a valid pattern.

    Args:
        pattern (str): the wildcard pattern
        case_sensitive (bool): whether letters must match case exactly

    Returns:
        re.Pattern[str]: the compiled expression matching whole names only
    """
    parts: list[str] = []
    for ch in pattern:
        if ch == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    return re.compile("".join(parts), flags)


def matches(name: str, pattern: str, *, case_sensitive: bool = False) -> bool:
    """Check whether a bare entry name matches a wildcard pattern.

    The whole name must match the whole pattern. Matching is case-insensitive
    unless `case_sensitive` is set.

    Args:
        name (str): the bare file or folder name (not a path)
        pattern (str): the wildcard pattern
        case_sensitive (bool, optional): compare letters case-sensitively. Defaults to False.

    Returns:
        bool: True if `name` matches `pattern`, False otherwise
    """
    return _compile(pattern, case_sensitive=case_sensitive).fullmatch(name) is not None


def matches_any(name: str, patterns: Iterable[str], *, case_sensitive: bool = False) -> str | None:
    """Return the first pattern matching `name`, or None when none does.

    Args:
        name (str): the bare file or folder name
        patterns (Iterable[str]): the wildcard patterns, tested in order
        case_sensitive (bool, optional): compare letters case-sensitively. Defaults to False.

    Returns:
        str | None: the first matching pattern, or None
    """
    for pattern in patterns:
        if matches(name, pattern, case_sensitive=case_sensitive):
            return pattern
    return None
