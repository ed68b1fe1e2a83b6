from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(StrEnum):
    """Kind of filesystem entry captured in a snapshot."""

    FILE = "file"
    FOLDER = "folder"


READ_ERROR_CONTENT = "Error: Could not read file content."

DEFAULT_MAX_DEPTH = 10_000

DEFAULT_INCLUDES = {
    ".bash",
    ".c",
    ".cfg",
    ".cpp",
    ".cs",
    ".css",
    ".go",
    ".h",
    ".hpp",
    ".html",
    ".ini",
    ".java",
    ".js",
    ".json",
    ".jsx",
    ".kt",
    ".md",
    ".php",
    ".ps1",
    ".py",
    ".rb",
    ".rs",
    ".sh",
    ".sql",
    ".toml",
    ".ts",
    ".tsx",
    ".txt",
    ".xml",
    ".yaml",
    ".yml",
    "Dockerfile",
    "Makefile",
}

DEFAULT_EXCLUDES = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "env",
    ".env",
    "__pycache__",
    ".mypy_cache",
    ".ruff_cache",
    ".pytest_cache",
    ".ipynb_checkpoints",
    ".tox",
    "node_modules",
    "dist",
    "build",
    "*.egg-info",
    "*.pyc",
    ".DS_Store",
    "Thumbs.db",
    ".idea",
    ".vscode",
}

GITIGNORE_NAME = ".gitignore"


class FileNode(BaseModel):
    """A captured file and its text content.

    Attributes:
        name: Base name of the file.
        path: POSIX path relative to the scan root, starting with "./".
        content: Full decoded text, or READ_ERROR_CONTENT when unreadable.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[NodeKind.FILE] = NodeKind.FILE
    name: str = Field(..., description="Base name of the entry")
    path: str = Field(..., description="POSIX path relative to the scan root")
    content: str = Field(..., description="Decoded file text or the read-error sentinel")


class FolderNode(BaseModel):
    """A captured folder and its matching descendants, in enumeration order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[NodeKind.FOLDER] = NodeKind.FOLDER
    name: str = Field(..., description="Base name of the entry")
    path: str = Field(..., description="POSIX path relative to the scan root")
    children: tuple[Node, ...] = Field(default=(), description="Child nodes, possibly empty")


Node = Annotated[FileNode | FolderNode, Field(discriminator="kind")]

FolderNode.model_rebuild()


class ScanOptions(BaseModel):
    """Immutable walk configuration, fixed before the walk begins.

    Attributes:
        include_specs: Bare file names or dotted extensions that qualify a file.
        exclude_patterns: Wildcard patterns tested against bare entry names.
        max_depth: Number of folder levels scanned, the root being level 1.
        case_sensitive: Whether names are compared case-sensitively.
    """

    model_config = ConfigDict(frozen=True)

    include_specs: frozenset[str] = Field(default_factory=lambda: frozenset(DEFAULT_INCLUDES))
    exclude_patterns: tuple[str, ...] = Field(default_factory=lambda: tuple(sorted(DEFAULT_EXCLUDES)))
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    case_sensitive: bool = False
