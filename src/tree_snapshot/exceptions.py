from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TreeSnapshotError(Exception):
    """Base exception for errors in the tree_snapshot package."""


@dataclass(frozen=True)
class RootNotFoundError(TreeSnapshotError):
    """Raised when the scan root is missing or is not a directory."""

    root: Path
    message: str = "The scan root does not exist or is not a directory."

    def __str__(self) -> str:
        return f"{self.message} ({self.root})"


@dataclass(frozen=True)
class OutputExistsError(TreeSnapshotError):
    """Raised when the output file exists and overwriting was not allowed."""

    output: Path
    message: str = "The output file already exists; pass --force to overwrite it."

    def __str__(self) -> str:
        return f"{self.message} ({self.output})"


@dataclass(frozen=True)
class IgnoreFileError(TreeSnapshotError):
    """Raised when an ignore file exists but cannot be read or decoded."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Failed to read ignore file {self.path}: {self.reason}"
