from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from tree_snapshot.config import DEFAULT_INCLUDES, DEFAULT_MAX_DEPTH


class Settings(BaseModel):
    """Configuration settings for a snapshot run."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    root: Path = Field(default_factory=Path.cwd, description="Directory to scan.")
    output: Path | None = Field(default=None, description="Output file (stdout when unset).")

    include: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_INCLUDES),
        description="File names or dotted extensions to capture.",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Extra wildcard patterns for names to skip.",
    )
    no_default_excludes: bool = Field(
        default=False,
        description="Do not apply the built-in exclusion patterns.",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Folder levels to scan, the root being level 1.",
    )
    ignore_file: Path | None = Field(
        default=None,
        description="Ignore file whose patterns are added to the exclusions.",
    )
    gitignore: bool = Field(default=False, description="Add patterns from <root>/.gitignore.")
    case_sensitive: bool = Field(default=False, description="Match names case-sensitively.")

    force: bool = Field(default=False, description="Overwrite an existing output file.")
    log_file: str = Field(default="", description="Log file path.")
    verbose: bool = Field(default=False, description="Log per-entry decisions.")
