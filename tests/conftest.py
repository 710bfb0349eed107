import pytest

from bellman_paths import logger


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(logger, "_LOG_DIR", str(tmp_path / "logs"))
