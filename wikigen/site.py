import logging, os, shutil
from pathlib import Path
from typing import Final
from .classify import EntryKind, classify, output_path
from .config import BuildConfig
from .exec import MediaCopyError
from .index import DirectoryIndex, ROOT
from .render import Renderer
from .report import BuildReport

logger = logging.getLogger(__name__)


class SiteRoot:
    """
    This class represents the source tree of the wiki.

    A single :meth:`walk` classifies every entry below the source root,
    renders stale content files, copies media directories and fills
    :attr:`index` for the index pages written afterwards.
    """
    config: Final[BuildConfig]
    report: Final[BuildReport]
    renderer: Final[Renderer]
    index: DirectoryIndex

    def __init__(self, config: BuildConfig, report: BuildReport | None = None):
        self.config = config
        self.report = report if report is not None else BuildReport()
        self.renderer = Renderer(config, self.report)
        self.index = DirectoryIndex()
        self._dest = config.dest_dir.resolve()

    def is_output(self, path: Path) -> bool:
        """True if ``path`` is the output root or lies below it."""
        return path.resolve().is_relative_to(self._dest)

    def walk(self) -> DirectoryIndex:
        """
        Walk the source tree once, parents before children.

        :raise MediaCopyError: If a media directory cannot be copied.
        :return: The populated directory index.
        """
        root = self.config.source_dir
        if self.is_output(root):
            logger.warning("%s lies inside the output %s, nothing to walk.", root, self.config.dest_dir)
            return self.index

        self.index.add_directory(ROOT)
        for dir_in, dirs, files in os.walk(root, onerror=self._on_error):
            current = Path(dir_in)
            relative = current.relative_to(root)
            key = DirectoryIndex.key(relative)

            # Children are registered in name order here, before they are visited.
            walk_into = []
            for name in sorted(dirs):
                path = current.joinpath(name)
                kind = classify(name, True, self.config)
                if kind is EntryKind.EXCLUDED or path.is_symlink() or self.is_output(path):
                    logger.debug("Skipping %s.", path)
                    continue

                self.index.add_directory(DirectoryIndex.key(relative.joinpath(name)))
                if kind is EntryKind.MEDIA:
                    self.copy_media(path, relative.joinpath(name))
                    continue

                walk_into.append(name)
            dirs[:] = walk_into

            for name in sorted(files):
                if classify(name, False, self.config) is not EntryKind.CONTENT:
                    continue
                self.build_file(current.joinpath(name), relative.joinpath(name), key)

        return self.index

    def build_file(self, path: Path, relative: Path, parent: str) -> None:
        try:
            info = path.stat()
        except OSError as e:
            self._on_error(e)
            return

        logger.debug("Found %s", relative)
        self.index.add_file(parent, path.name)
        self.renderer.render(path, info.st_mtime, output_path(relative, self.config))

    def copy_media(self, path: Path, relative: Path) -> None:
        """
        Copy the contents of a media directory to its mirror in the output,
        overwriting what is there.

        :raise MediaCopyError: If the copy fails.
        """
        dest = self.config.dest_dir.joinpath(relative)
        logger.info("Copying media %s.", relative)
        try:
            dest.mkdir(parents=True, exist_ok=True)
            shutil.copytree(path, dest, dirs_exist_ok=True)
        except OSError as e:
            raise MediaCopyError(f"could not copy to {dest}: {e}", path) from e
        self.report.media += 1

    def _on_error(self, error: OSError) -> None:
        path = Path(error.filename) if error.filename else self.config.source_dir
        logger.warning("%s: %s", path, error.strerror or error)
        self.report.warn(path, error.strerror or str(error))
