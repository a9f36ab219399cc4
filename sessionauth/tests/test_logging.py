from __future__ import annotations

import os

import pytest

from sessionauth.shared.logging.logger import _log_file_path, setup_logging


def test_log_file_defaults_to_working_directory(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.chdir(tmp_path)

    assert _log_file_path() == os.path.join(str(tmp_path), "instance", "app.log")


def test_log_file_from_environment(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "logs" / "auth.log"
    monkeypatch.setenv("LOG_FILE", str(target))

    setup_logging("INFO")

    assert _log_file_path() == str(target)
    assert target.parent.is_dir()
