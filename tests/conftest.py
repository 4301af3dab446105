"""
Pytest configuration and shared fixtures for tapresolver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tapresolver.fs import LocalFileSystem


class RecordingLogger:
    """Logger that records every message instead of printing it."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.verbose_messages: list[str] = []
        self.debug_messages: list[str] = []

    def warning(self, prefix: str, message: str) -> None:
        self.warnings.append(message)

    def verbose(self, prefix: str, message: str) -> None:
        self.verbose_messages.append(message)

    def debug(self, prefix: str, message: str) -> None:
        self.debug_messages.append(message)


class CountingFileSystem(LocalFileSystem):
    """Real filesystem that counts existence and directory probes."""

    def __init__(self) -> None:
        self.exists_calls = 0
        self.is_dir_calls = 0

    def exists(self, path: Path) -> bool:
        self.exists_calls += 1
        return super().exists(path)

    def is_dir(self, path: Path) -> bool:
        self.is_dir_calls += 1
        return super().is_dir(path)

    @property
    def probes(self) -> int:
        return self.exists_calls + self.is_dir_calls


@pytest.fixture(autouse=True)
def clean_tap_env(monkeypatch):
    """Keep TAP/CLIENT/LOG from the outer environment out of the tests."""
    for var in ("TAP", "CLIENT", "LOG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_app_config() -> dict[str, Any]:
    """
    Provide a root app.json with every tapResolver path set.

    Merged configs are written to <tap>/temp so tests never touch the
    shared default temp folder.
    """
    return {
        "name": "tap-resolver",
        "displayName": "Tap Resolver",
        "tapResolver": {
            "paths": {
                "externalTaps": "node_modules/external-taps/taps",
                "localTaps": "taps",
                "baseTap": "base",
                "tapAssets": "assets",
                "temp": "temp",
            },
            "extensions": {
                "resolve": [".js", ".json"],
            },
        },
        "clientResolver": {
            "aliases": {
                "nameSpace": "tap",
            },
        },
        "plugins": ["root-plugin"],
    }


@pytest.fixture
def create_json_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary JSON files.

    Usage:
        json_path = create_json_file("app/app.json", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _create


@pytest.fixture
def app_root(tmp_test_dir: Path, create_json_file, sample_app_config) -> Path:
    """Provide an app root with app.json, a base tap and an empty taps folder."""
    root = tmp_test_dir / "app"
    create_json_file("app/app.json", sample_app_config)
    (root / "base").mkdir(parents=True)
    (root / "taps").mkdir()
    return root


@pytest.fixture
def create_tap(app_root: Path, create_json_file):
    """
    Factory fixture for creating tap folders.

    Usage:
        tap_path = create_tap("acme", {"name": "acme"})
        tap_path = create_tap("acme", location="node_modules/external-taps/taps")
    """

    def _create(
        name: str, config: dict[str, Any] | None = None, location: str = "taps"
    ) -> Path:
        tap_path = app_root / location / name
        tap_path.mkdir(parents=True, exist_ok=True)
        if config is not None:
            create_json_file(f"app/{location}/{name}/app.json", config)
        return tap_path

    return _create


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a logger that records warnings and diagnostics."""
    return RecordingLogger()


@pytest.fixture
def counting_fs() -> CountingFileSystem:
    """Provide a real filesystem that counts probes."""
    return CountingFileSystem()
