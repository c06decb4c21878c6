from pathlib import Path


class BuildException(Exception):
    """A failure that aborts the whole build."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.message = message
        self.path = path
        super().__init__(message, path)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class MediaCopyError(BuildException):
    """A media directory could not be copied into the output tree."""


class IndexWriteError(BuildException):
    """An index source could not be written or read back."""
