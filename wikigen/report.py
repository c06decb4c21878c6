from dataclasses import dataclass, field
from pathlib import Path
from .context import BuildReason


@dataclass(frozen=True)
class BuildWarning:
    """A failure that was logged and stepped over, rather than aborting the build."""
    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class BuildReport:
    created: int = 0
    changed: int = 0
    unchanged: int = 0
    forced: int = 0
    media: int = 0
    indexes: int = 0
    time_seconds: float = 0.0
    warnings: list[BuildWarning] = field(default_factory=list)

    def warn(self, path: Path, message: str) -> None:
        self.warnings.append(BuildWarning(path, message))

    def add_stat(self, build_reason: BuildReason):
        match build_reason:
            case BuildReason.CREATED:
                self.created += 1
            case BuildReason.CHANGED:
                self.changed += 1
            case BuildReason.UNCHANGED:
                self.unchanged += 1
            case BuildReason.FORCED:
                self.forced += 1

    def summary(self) -> str:
        total = self.created + self.changed + self.unchanged + self.forced
        if total == 0 and self.media == 0:
            return "Nothing to do."

        status = (
            "Build finished with warnings."
            if self.warnings
            else "Build finished successfully."
        )
        lines = [
            status,
            f"Checked {total} targets in {self.time_seconds:.2f}s.",
        ]
        stats = [
            ("Created", self.created),
            ("Changed", self.changed),
            ("Forced", self.forced),
            ("Unchanged", self.unchanged),
            ("Media", self.media),
            ("Indexes", self.indexes),
            ("Warnings", len(self.warnings)),
        ]

        width = max(len(name) for name, _ in stats)
        for name, value in stats:
            if value:
                lines.append(f"  {name.ljust(width)} {value}")
        return "\n".join(lines)
