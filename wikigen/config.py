import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Iterable, Self

DEFAULT_EXCLUDE: Final[str] = "html,.git"
DEFAULT_MEDIA: Final[str] = "img,resources"


def split_names(value: str | None) -> frozenset[str]:
    """Split a comma separated option into a set of names, dropping blanks."""
    if not value:
        return frozenset()
    return frozenset(name.strip() for name in value.split(",") if name.strip())


@dataclass(frozen=True)
class BuildConfig:
    """
    Settings for a single build. Read once from the command line and never
    mutated afterwards.

    :ivar source_dir: Root of the wiki sources.
    :ivar dest_dir: Root of the rendered output.
    :ivar exclude: Entry names skipped entirely, with their subtree.
    :ivar media: Directory names copied verbatim instead of rendered.
    :ivar pdf: Also render a PDF next to every HTML page.
    :ivar requires: Values passed to the renderer as ``-r <value>``, in order.
    :ivar force: Treat every target as stale.
    """
    source_dir: Path
    dest_dir: Path
    exclude: frozenset[str] = field(default_factory=lambda: split_names(DEFAULT_EXCLUDE))
    media: frozenset[str] = field(default_factory=lambda: split_names(DEFAULT_MEDIA))
    pdf: bool = False
    requires: tuple[str, ...] = ()
    force: bool = False
    renderer: str = "asciidoctor"
    pdf_renderer: str = "asciidoctor-pdf"
    source_ext: str = ".adoc"
    target_ext: str = ".html"
    index_name: str = "_index.adoc"

    @classmethod
    def from_options(
            cls,
            path: str | os.PathLike,
            out: str | os.PathLike,
            exclude: str | None = DEFAULT_EXCLUDE,
            media: str | None = DEFAULT_MEDIA,
            requires: Iterable[str] = (),
            **kwargs,
    ) -> Self:
        """
        Build a configuration from raw command line values.

        Paths are normalized here so that ``./wiki/`` and ``wiki`` compare equal
        for the rest of the build.
        """
        return cls(
            source_dir=Path(os.path.normpath(path)),
            dest_dir=Path(os.path.normpath(out)),
            exclude=split_names(exclude),
            media=split_names(media),
            requires=tuple(requires),
            **kwargs,
        )

    @property
    def index_target(self) -> str:
        return "index" + self.target_ext
