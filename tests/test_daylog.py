from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pytest

from pyfconf import write_log


def test_write_log_appends(tmp_path: Path) -> None:
    base = str(tmp_path / "etl")
    now = datetime(2024, 5, 6, 7, 8, 9)
    assert write_log(base, "started", now)
    assert write_log(base, "done", now)
    log = tmp_path / "etl_2024-05-06.txt"
    assert log.read_text(encoding="utf-8") == (
        "2024-05-06 07:08:09  started\n"
        "2024-05-06 07:08:09  done\n"
    )


def test_write_log_defaults_to_today(tmp_path: Path) -> None:
    base = str(tmp_path / "etl")
    assert write_log(base, "x")
    assert len(list(tmp_path.glob("etl_*.txt"))) == 1


def test_write_log_failure_is_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    base = str(tmp_path / "missing" / "etl")
    with caplog.at_level(logging.WARNING, logger="pyfconf.daylog"):
        assert not write_log(base, "x", datetime(2024, 1, 1))
    assert "Unable to write log" in caplog.text
