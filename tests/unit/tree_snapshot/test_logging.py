import logging
from pathlib import Path

import pytest

from tree_snapshot import logging as snapshot_logging
from tree_snapshot.logging import setup_logging


@pytest.mark.unit
def test_setup_logging_keeps_host_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    host_handler = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(host_handler)
    monkeypatch.setattr(snapshot_logging, "_LOGGING_CONFIGURED", False)
    try:
        setup_logging()
        setup_logging()

        assert host_handler in root.handlers
        assert snapshot_logging._LOGGING_CONFIGURED is True
    finally:
        root.removeHandler(host_handler)


@pytest.mark.unit
def test_setup_logging_force_replaces_handlers(tmp_path: Path) -> None:
    host_handler = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(host_handler)
    log_file = tmp_path / "run.log"
    try:
        setup_logging(log_file, verbose=True, force=True)

        assert host_handler not in root.handlers
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        root.removeHandler(host_handler)
        setup_logging(force=True)
