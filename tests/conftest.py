import pytest

from core.config import AppSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Run every test from an empty cwd with no CREATIONAL_* overrides."""
    for name in ("CREATIONAL_LOG_LEVEL", "CREATIONAL_SCRATCH_PATH", "CREATIONAL_SHOW_BANNER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(scratch_path=tmp_path / "scratch.json", show_banner=False)
