from __future__ import annotations

from pathlib import Path

from tests.fixtures import write
from wikigen.context import BuildContext, BuildReason


def test_missing_target_is_created(tmp_path: Path) -> None:
    src = write(tmp_path / "a.adoc", mtime=1_000)
    ctx = BuildContext(src, 1_000, tmp_path / "a.html")
    assert ctx.dest_path_lastmod is None
    assert ctx.build_reason is BuildReason.CREATED
    assert ctx.is_modified


def test_older_target_is_changed(tmp_path: Path) -> None:
    src = write(tmp_path / "a.adoc", mtime=2_000)
    dest = write(tmp_path / "a.html", mtime=1_000)
    assert BuildContext(src, 2_000, dest).build_reason is BuildReason.CHANGED


def test_target_as_new_as_source_is_unchanged(tmp_path: Path) -> None:
    src = write(tmp_path / "a.adoc", mtime=2_000)
    dest = write(tmp_path / "a.html", mtime=2_000)
    ctx = BuildContext(src, 2_000, dest)
    assert ctx.build_reason is BuildReason.UNCHANGED
    assert not ctx.is_modified


def test_forced_overrides_fresh_target(tmp_path: Path) -> None:
    src = write(tmp_path / "a.adoc", mtime=1_000)
    dest = write(tmp_path / "a.html", mtime=5_000)
    ctx = BuildContext(src, 1_000, dest, forced=True)
    assert ctx.build_reason is BuildReason.FORCED
    assert ctx.is_modified
