from .build import build
from .classify import EntryKind, classify, output_path
from .config import BuildConfig
from .context import BuildContext, BuildReason
from .exec import BuildException, MediaCopyError, IndexWriteError
from .index import DirectoryIndex, IndexWriter
from .render import Renderer
from .report import BuildReport, BuildWarning
from .site import SiteRoot

__version__ = "0.1.0"
__all__ = [
    "BuildConfig",
    "BuildContext",
    "BuildReason",
    "BuildReport",
    "BuildWarning",
    "DirectoryIndex",
    "IndexWriter",
    "Renderer",
    "SiteRoot",
    "EntryKind",
    "BuildException",
    "MediaCopyError",
    "IndexWriteError",
    "classify",
    "output_path",
    "build"
]
