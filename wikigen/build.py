import logging
import time
from .config import BuildConfig
from .index import IndexWriter
from .report import BuildReport
from .site import SiteRoot

logger = logging.getLogger(__name__)


def build(config: BuildConfig) -> BuildReport:
    """
    Build the wiki described by ``config`` in one pass.

    The source tree is walked first, rendering stale pages and copying media
    as it goes. Index pages are written once the walk has finished, from the
    completed directory index.

    :param config: BuildConfig instance.
    :return: Counters and warnings collected during the build.
    :raises BuildException: On a media copy or index write failure. Outputs
        already produced are left in place.
    """
    s_time = time.perf_counter()
    site = SiteRoot(config)
    logger.info("Building wiki at %s into %s.", config.source_dir, config.dest_dir)

    index = site.walk()
    logger.info("Writing indexes for %d directories...", len(index))
    IndexWriter(config, site.renderer, site.report).write_all(index)

    site.report.time_seconds = time.perf_counter() - s_time
    return site.report
