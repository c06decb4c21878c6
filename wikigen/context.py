from datetime import datetime, timezone
from enum import IntEnum
from pathlib import Path
from typing import Final, Optional


class BuildReason(IntEnum):
    CREATED = 0
    CHANGED = 1
    UNCHANGED = 2
    FORCED = 3


def lastmod(path: Path) -> Optional[datetime]:
    """Modification time of ``path`` in UTC, or ``None`` if it does not exist."""
    try:
        return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    except FileNotFoundError:
        return None


class BuildContext:
    """
    Staleness decision for one source/target pair. Computed fresh on every
    run and never persisted.

    :ivar source_path: Path to the source document.
    :ivar source_path_lastmod: The last modified date of the source file.
    :ivar dest_path: Path to the rendered output.
    :ivar dest_path_lastmod: The last modified date of the output, if it exists.
    :ivar forced: Rebuild regardless of modification times.
    """
    source_path: Final[Path]
    source_path_lastmod: Final[datetime]
    dest_path: Final[Path]
    dest_path_lastmod: Final[Optional[datetime]]
    forced: Final[bool]

    def __init__(
            self,
            source: Path,
            source_lastmod: datetime | float,
            dest: Path,
            forced: bool = False,
    ):
        if not isinstance(source_lastmod, datetime):
            source_lastmod = datetime.fromtimestamp(source_lastmod, tz=timezone.utc)

        self.source_path = source
        self.source_path_lastmod = source_lastmod
        self.dest_path = dest
        self.dest_path_lastmod = lastmod(dest)
        self.forced = forced

    @property
    def build_reason(self) -> BuildReason:
        if self.forced:
            return BuildReason.FORCED

        if self.dest_path_lastmod is None:
            return BuildReason.CREATED

        if self.dest_path_lastmod < self.source_path_lastmod:
            return BuildReason.CHANGED

        return BuildReason.UNCHANGED

    @property
    def is_modified(self) -> bool:
        return self.build_reason != BuildReason.UNCHANGED

    def __repr__(self) -> str:
        return f"<BuildContext {self.source_path} -> {self.dest_path} {self.build_reason.name}>"
