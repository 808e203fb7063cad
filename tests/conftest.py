from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from vitetags.infrastructure.config import reset_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("VITE_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_manifest(root: Path, data: object, build_dir: str = "build") -> Path:
    path = root / build_dir / "manifest.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


def write_hot(root: Path, origin: str = "http://localhost:5173") -> Path:
    path = root / "hot"
    path.write_text(origin, encoding="utf-8")
    return path
