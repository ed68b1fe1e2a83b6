"""Capture a directory tree and its text files as a single YAML document."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tree-snapshot")
except PackageNotFoundError:
    __version__ = "unknown"
