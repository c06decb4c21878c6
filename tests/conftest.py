from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures import FakeRenderer
from wikigen.config import BuildConfig


@pytest.fixture
def renderer(monkeypatch: pytest.MonkeyPatch) -> FakeRenderer:
    fake = FakeRenderer()
    monkeypatch.setattr("wikigen.render.subprocess.run", fake)
    return fake


@pytest.fixture
def wiki(tmp_path: Path) -> Path:
    root = tmp_path / "wiki"
    root.mkdir()
    return root


@pytest.fixture
def config(wiki: Path):
    def _config(**kwargs) -> BuildConfig:
        kwargs.setdefault("path", wiki)
        kwargs.setdefault("out", wiki / "html")
        return BuildConfig.from_options(**kwargs)

    return _config
