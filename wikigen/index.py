import logging
from pathlib import Path, PurePosixPath
from typing import Final, Iterator
from jinja2 import Template, TemplateError
from .classify import index_output_path
from .config import BuildConfig
from .exec import IndexWriteError
from .render import Renderer
from .report import BuildReport
from .templates import DEFAULT_INDEX_TEMPLATE, PARENT_LINK

logger = logging.getLogger(__name__)
ROOT: Final[str] = "."
DIR_MARKER: Final[str] = "/"


def parent_key(key: str) -> str:
    return PurePosixPath(key).parent.as_posix()


class DirectoryIndex:
    """
    Children discovered during a walk, keyed by directory path relative to
    the source root (``"."`` for the root itself).

    Directories are stored with a trailing ``/``, content files by name.
    Insertion order is discovery order and becomes link order on the index
    page.
    """

    def __init__(self):
        self._entries: dict[str, list[str]] = {}

    @staticmethod
    def key(relative: Path | str) -> str:
        return PurePosixPath(relative).as_posix()

    def add_directory(self, key: str) -> None:
        """Register a visited directory, appending it to its parent's entry."""
        if key in self._entries:
            return

        self._entries[key] = []
        if key != ROOT:
            self._entries.setdefault(parent_key(key), []).append(
                PurePosixPath(key).name + DIR_MARKER
            )

    def add_file(self, parent: str, name: str) -> None:
        self._entries.setdefault(parent, []).append(name)

    def __getitem__(self, key: str) -> list[str]:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def listing(self, key: str, index_name: str) -> tuple[list[str], list[str]]:
        """
        Split a directory's entry into the links of its index page.

        :return: Directory links, with ``../`` first unless ``key`` is the
            root, and file names. The reserved index source and any
            self-reference are left out.
        """
        dirs = [] if key == ROOT else [PARENT_LINK]
        files = []
        for child in self._entries[key]:
            if child == ROOT + DIR_MARKER:
                continue
            if child.endswith(DIR_MARKER):
                dirs.append(child)
            elif child != index_name:
                files.append(child)
        return dirs, files


class IndexWriter:
    """
    Writes an index source into every directory that has something to list,
    then renders it like any other page.
    """
    config: Final[BuildConfig]
    renderer: Final[Renderer]
    report: Final[BuildReport]
    template: Final[Template]

    def __init__(
            self,
            config: BuildConfig,
            renderer: Renderer,
            report: BuildReport,
            template: Template = DEFAULT_INDEX_TEMPLATE,
    ):
        self.config = config
        self.renderer = renderer
        self.report = report
        self.template = template

    def write_all(self, index: DirectoryIndex) -> None:
        for key in index:
            dirs, files = index.listing(key, self.config.index_name)

            # Below the root the single link is the one back up.
            if not files and len(dirs) == 1:
                logger.debug("No index needed for %s.", key)
                continue

            self.write(key, dirs, files)

    def write(self, key: str, dirs: list[str], files: list[str]) -> Path:
        """
        Write and render the index of one directory.

        The source is only rewritten when its text changed; a rewritten
        source always forces a render of its output.

        :raise IndexWriteError: If the index source cannot be written or
            stat'ed afterwards.
        :return: Path to the index source.
        """
        source = self.config.source_dir.joinpath(key, self.config.index_name)
        try:
            text = self.template.render(dir_name=key, dirs=dirs, files=files)
        except TemplateError as e:
            raise IndexWriteError(f"template error: {e}", source) from e

        rewritten = _write_if_changed(source, text)
        try:
            mtime = source.stat().st_mtime
        except OSError as e:
            raise IndexWriteError(e.strerror or str(e), source) from e

        logger.debug("%s index %s.", "Wrote" if rewritten else "Kept", source)
        self.report.indexes += 1
        self.renderer.render(
            source,
            mtime,
            index_output_path(key, self.config),
            forced=rewritten,
        )
        return source


def _write_if_changed(path: Path, text: str) -> bool:
    try:
        if path.read_text(encoding="utf-8", errors="replace") == text:
            return False
    except FileNotFoundError:
        logger.debug("Creating index %s.", path)
    except OSError as e:
        raise IndexWriteError(e.strerror or str(e), path) from e

    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise IndexWriteError(e.strerror or str(e), path) from e
    return True
