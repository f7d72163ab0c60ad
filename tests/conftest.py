"""Shared test fixtures: isolated environment and logging state."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Drop LINTNAMES_* variables and any local .env from Settings()."""
    for key in list(os.environ):
        if key.startswith("LINTNAMES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture(autouse=True)
def _reset_logging_flag() -> None:
    import lintnames.logging_config as mod

    mod._configured = False
