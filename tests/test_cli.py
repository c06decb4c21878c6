from __future__ import annotations

import logging
from pathlib import Path

from click.testing import CliRunner

from tests.fixtures import FakeRenderer, write
from wikigen import __version__
from wikigen.__main__ import cli
from wikigen.log import LogFormatter


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_build_passes_options_through(wiki: Path, tmp_path: Path, renderer: FakeRenderer) -> None:
    write(wiki / "a.adoc")
    out = tmp_path / "out"

    result = CliRunner().invoke(cli, [
        "build",
        "--path", str(wiki),
        "--out", str(out),
        "--pdf",
        "-r", "asciidoctor-diagram",
        "-r", "./ext.rb",
    ])

    assert result.exit_code == 0, result.output
    assert [
        "asciidoctor", "-o", str(out / "a.html"),
        "-r", "asciidoctor-diagram", "-r", "./ext.rb",
        str(wiki / "a.adoc"),
    ] in renderer.calls
    assert [
        "asciidoctor-pdf", "-o", str(out / "a.pdf"),
        "-r", "asciidoctor-diagram", "-r", "./ext.rb",
        str(wiki / "a.adoc"),
    ] in renderer.calls


def test_force_rebuilds_unchanged_pages(wiki: Path, tmp_path: Path, renderer: FakeRenderer) -> None:
    write(wiki / "a.adoc")
    args = ["build", "--path", str(wiki), "--out", str(tmp_path / "out")]
    assert CliRunner().invoke(cli, args).exit_code == 0
    renderer.reset()

    assert CliRunner().invoke(cli, args + ["--force"]).exit_code == 0

    assert len(renderer.calls) == 2


def test_render_failure_does_not_fail_the_build(wiki: Path, tmp_path: Path, renderer: FakeRenderer) -> None:
    write(wiki / "bad.adoc")
    renderer.failing.add("bad.adoc")

    result = CliRunner().invoke(cli, ["build", "--path", str(wiki), "--out", str(tmp_path / "out")])

    assert result.exit_code == 0


def test_fatal_error_exits_non_zero(wiki: Path, tmp_path: Path, renderer: FakeRenderer) -> None:
    write(wiki / "img" / "logo.png", "png")
    out = tmp_path / "out"
    write(out / "img", "in the way")

    result = CliRunner().invoke(cli, ["build", "--path", str(wiki), "--out", str(out)])

    assert result.exit_code == 1


def test_log_formatter_prefixes_warnings() -> None:
    def record(level: int) -> logging.LogRecord:
        return logging.LogRecord("wikigen", level, __file__, 1, "%s failed", ("a.adoc",), None)

    plain = LogFormatter(color=False)
    assert plain.format(record(logging.INFO)) == "a.adoc failed"
    assert plain.format(record(logging.WARNING)) == "Warn: a.adoc failed"
    assert LogFormatter().format(record(logging.ERROR)) == "\033[31mError: a.adoc failed\033[0m"
