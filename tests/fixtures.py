from __future__ import annotations

import os
import subprocess
from pathlib import Path


class FakeRenderer:
    """Stands in for ``subprocess.run``, writing the ``-o`` target like asciidoctor would."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.failing: set[str] = set()
        self.missing: set[str] = set()

    def __call__(self, args, **kwargs) -> subprocess.CompletedProcess[str]:
        args = list(args)
        self.calls.append(args)
        if args[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        if Path(args[-1]).name in self.failing:
            raise subprocess.CalledProcessError(1, args, output="", stderr="asciidoctor: FAILED: bad input")

        dest = Path(args[args.index("-o") + 1])
        dest.write_text(f"rendered {args[-1]}\n", encoding="utf-8")
        return subprocess.CompletedProcess(args, 0, "", "")

    @property
    def outputs(self) -> list[Path]:
        return [Path(call[call.index("-o") + 1]) for call in self.calls]

    def reset(self) -> None:
        self.calls.clear()


def write(path: Path, content: str = "= Page\n\nBody.\n", mtime: float | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="\n")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path
