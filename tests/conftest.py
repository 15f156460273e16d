from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    """Prevent the developer's SVCS_ROOT / SVCS_DEBUG from influencing tests."""

    monkeypatch.delenv("SVCS_ROOT", raising=False)
    monkeypatch.delenv("SVCS_DEBUG", raising=False)


@pytest.fixture
def project(tmp_path):
    """Create an empty working directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root
