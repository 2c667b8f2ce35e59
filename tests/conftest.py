"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests (applied from directory)")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """The StageResult runner used by command tests."""
    return _run_cmd


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Never pick up a developer's DOCLINKS_CONFIG."""
    monkeypatch.delenv("DOCLINKS_CONFIG", raising=False)


@pytest.fixture
def write_config(tmp_path, monkeypatch):
    """Write a JSON config file and point DOCLINKS_CONFIG at it."""

    def _write(data: dict | str) -> Path:
        path = tmp_path / "doclinks.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        monkeypatch.setenv("DOCLINKS_CONFIG", str(path))
        return path

    return _write


@pytest.fixture
def content_dir(tmp_path):
    """Factory building a documentation tree from {relative_path: text}."""

    def _build(files: dict[str, str]) -> Path:
        root = tmp_path / "content"
        root.mkdir(exist_ok=True)
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _build
