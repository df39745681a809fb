import pytest

from appkey import logging_setup


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("APPKEY_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("APPKEY_DATA_DIR", raising=False)
    yield
    logging_setup.shutdown_logging()
