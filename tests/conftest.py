# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from mediameta.common.settings import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_probe_json(name: str) -> Dict[str, Any]:
    return json.loads((FIXTURES_DIR / name).read_text())


def completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> MagicMock:
    """Stand-in for subprocess.CompletedProcess."""
    return MagicMock(stdout=stdout, stderr=stderr, returncode=returncode)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    # settings are cached process-wide; never let a developer's env leak in
    monkeypatch.delenv("FFPROBE_PATH", raising=False)
    monkeypatch.delenv("FFPROBE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_media_file(tmp_path):
    """Create a dummy file with the given name and byte size; ffprobe is mocked anyway."""
    def _make(name: str, size: int = 1234) -> Path:
        p = tmp_path / name
        p.write_bytes(b"\0" * size)
        return p
    return _make


@pytest.fixture
def probe_json():
    """Loader for the raw ffprobe documents under tests/fixtures."""
    return load_probe_json


@pytest.fixture
def fake_ffprobe(monkeypatch):
    """
    Patch subprocess.run as seen by the ffprobe helpers.
    Call it with a decoded document (or a raw stdout string) and optional stderr/returncode;
    returns the mock so tests can inspect the argument list.
    """
    def _install(payload: Any = None, stderr: str = "", returncode: int = 0) -> MagicMock:
        stdout = payload if isinstance(payload, str) else json.dumps(payload)
        run = MagicMock(return_value=completed(stdout=stdout, stderr=stderr, returncode=returncode))
        monkeypatch.setattr("mediameta.common.probe.ffprobe_helpers.subprocess.run", run)
        return run
    return _install
