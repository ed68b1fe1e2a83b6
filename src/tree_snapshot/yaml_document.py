"""Render a captured tree as an indentation-based YAML document.

Each node becomes a sequence item with `name`, `type` and `path` fields, followed
by either `children` (a nested sequence, or `[]` when empty) or `content`, a
literal block scalar reproducing the file text line for line.

Content is not escaped. Text holding characters YAML forbids (most C0 control
characters, for instance) still yields a document, but a strict parser may reject
it. Line breaks are normalized to "\\n" by any YAML parser.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import yaml

from tree_snapshot.config import FileNode, FolderNode, NodeKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tree_snapshot.config import Node

INDENT = "  "
BLOCK_INDENT_INDICATOR = 2

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text on any of "\\r\\n", "\\n" or "\\r".

    Empty segments are kept, including the trailing one produced by a final
    line break, so "a\\nb\\n" gives ["a", "b", ""].

    Args:
        text (str): the text to split

    Returns:
        list[str]: the line segments, never empty
    """
    return _LINE_BREAK.split(text)


def _trailing_breaks(segments: Sequence[str]) -> tuple[int, bool]:
    """Count line breaks after the last non-empty segment.

    Returns:
        tuple[int, bool]: the count, and whether any non-empty segment exists
    """
    for idx in range(len(segments) - 1, -1, -1):
        if segments[idx]:
            return len(segments) - 1 - idx, True
    return len(segments) - 1, False


def literal_block_header(text: str) -> str:
    """Pick the block scalar header that makes a parser give `text` back.

    The indentation indicator is always explicit so that a first line starting
    with spaces is not mistaken for deeper indentation. The chomping indicator
    depends on how the text ends:

    - no final line break: strip ("|2-")
    - exactly one, after some text: clip ("|2")
    - more than one, or nothing but line breaks: keep ("|2+")

    Args:
        text (str): the file content

    Returns:
        str: the header, e.g. "|2-"
    """
    breaks, has_text = _trailing_breaks(split_lines(text))
    if breaks == 0:
        chomp = "-"
    elif breaks == 1 and has_text:
        chomp = ""
    else:
        chomp = "+"
    return f"|{BLOCK_INDENT_INDICATOR}{chomp}"


def literal_block_lines(text: str, indent: str) -> list[str]:
    """Indent every segment of `text` as one line of a literal block.

    Under keep chomping the final empty segment is left out, as its line break
    is already kept by the previous line.

    Args:
        text (str): the file content
        indent (str): the block indentation

    Returns:
        list[str]: the indented lines
    """
    segments = split_lines(text)
    if literal_block_header(text).endswith("+"):
        segments = segments[:-1]
    return [indent + seg for seg in segments]


def quote(value: str) -> str:
    """Render a string as a single-line double-quoted scalar.

    pyyaml escapes every character YAML cannot carry raw: non-printable code
    points, the YAML line breaks (U+0085, U+2028, U+2029) and lone surrogates
    left by undecodable file names.

    Args:
        value (str): the string to quote

    Returns:
        str: the quoted scalar
    """
    text = yaml.safe_dump(value, default_style='"', width=float("inf"), allow_unicode=True)
    return text.removesuffix("...\n").rstrip("\n")


def _render(nodes: Sequence[Node], indent_level: int, out: list[str]) -> None:
    prefix = INDENT * indent_level
    field = prefix + INDENT
    for node in nodes:
        out.append(f"{prefix}- name: {quote(node.name)}")
        out.append(f"{field}type: {NodeKind(node.kind).value}")
        out.append(f"{field}path: {quote(node.path)}")
        if isinstance(node, FileNode):
            out.append(f"{field}content: {literal_block_header(node.content)}")
            out.extend(literal_block_lines(node.content, field + INDENT))
        elif isinstance(node, FolderNode):
            if not node.children:
                out.append(f"{field}children: []")
                continue
            out.append(f"{field}children:")
            _render(node.children, indent_level + 2, out)


def serialize(nodes: Sequence[Node], indent_level: int = 0) -> str:
    """Render nodes as a YAML block sequence, depth-first and pre-order.

    Args:
        nodes (Sequence[Node]): the nodes to render, in order
        indent_level (int, optional): nesting level of the sequence, two spaces each. Defaults to 0.

    Returns:
        str: the YAML text, ending with a line break ("" for no nodes)
    """
    out: list[str] = []
    _render(nodes, indent_level, out)
    if not out:
        return ""
    return "\n".join(out) + "\n"
