import os
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from tree_snapshot.exceptions import IgnoreFileError
from tree_snapshot.ignore_rules import load_ignore_file, normalize_ignore_line, read_ignore_lines


@pytest.mark.unit
@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("  build/  ", "build"),
        ("dist\\", "dist"),
        ("*.log", "*.log"),
        ("", None),
        ("   ", None),
        ("# comment", None),
        ("   # indented comment", None),
        ("/", None),
    ],
)
def test_normalize_ignore_line(line: str, expected: str | None) -> None:
    assert normalize_ignore_line(line) == expected


@pytest.mark.unit
def test_normalize_ignore_line_uses_host_separator() -> None:
    assert normalize_ignore_line("docs/api/") == "docs" + os.sep + "api"


@pytest.mark.unit
def test_load_ignore_file_parses_patterns_in_order(tmp_path: Path) -> None:
    ignore = tmp_path / ".gitignore"
    ignore.write_text("# deps\nnode_modules/\n\n*.log\n  secrets.txt  \n", encoding="utf-8")

    assert load_ignore_file(ignore) == ["node_modules", "*.log", "secrets.txt"]


@pytest.mark.unit
def test_load_ignore_file_missing_warns_and_returns_empty(tmp_path: Path) -> None:
    with capture_logs() as logs:
        patterns = load_ignore_file(tmp_path / "nope.ignore")

    assert patterns == []
    assert [entry["log_level"] for entry in logs] == ["warning"]
    assert "nope.ignore" in logs[0]["event"]


@pytest.mark.unit
def test_load_ignore_file_undecodable_warns_and_returns_empty(tmp_path: Path) -> None:
    ignore = tmp_path / ".gitignore"
    ignore.write_bytes(b"*.log\n\xff\xfe\xfa\n")

    with capture_logs() as logs:
        patterns = load_ignore_file(ignore)

    assert patterns == []
    assert any(entry["log_level"] == "warning" for entry in logs)


@pytest.mark.unit
def test_read_ignore_lines_wraps_decode_errors(tmp_path: Path) -> None:
    ignore = tmp_path / ".gitignore"
    ignore.write_bytes(b"\xff\xff")

    with pytest.raises(IgnoreFileError) as exc_info:
        read_ignore_lines(ignore)

    assert exc_info.value.path == ignore
    assert str(ignore) in str(exc_info.value)
