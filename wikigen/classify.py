from enum import Enum
from pathlib import Path
from .config import BuildConfig


class EntryKind(Enum):
    """What the walker does with a single filesystem entry."""
    EXCLUDED = "excluded"
    MEDIA = "media"
    INDEX = "index"
    CONTENT = "content"
    DIRECTORY = "directory"
    OTHER = "other"

    @classmethod
    def of(cls, name: str, is_dir: bool, config: BuildConfig) -> "EntryKind":
        """
        Classify an entry by its base name.

        Exclusion wins over media, so an excluded name is never scanned even
        if it is also listed as media.
        """
        if name in config.exclude:
            return cls.EXCLUDED

        if is_dir:
            return cls.MEDIA if name in config.media else cls.DIRECTORY

        if name == config.index_name:
            return cls.INDEX

        if name.endswith(config.source_ext):
            return cls.CONTENT

        return cls.OTHER


def classify(name: str, is_dir: bool, config: BuildConfig) -> EntryKind:
    return EntryKind.of(name, is_dir, config)


def output_path(relative: Path, config: BuildConfig) -> Path:
    """Output location of a source path given relative to the source root."""
    name = relative.name
    if name.endswith(config.source_ext):
        name = name.removesuffix(config.source_ext)
    else:
        name = relative.stem
    return config.dest_dir.joinpath(relative.parent, name + config.target_ext)


def index_output_path(directory: str, config: BuildConfig) -> Path:
    return config.dest_dir.joinpath(directory, config.index_target)
