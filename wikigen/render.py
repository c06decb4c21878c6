import logging
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Final, List
from .config import BuildConfig
from .context import BuildContext
from .report import BuildReport

logger = logging.getLogger(__name__)


class Renderer:
    """
    Runs the external renderer for targets that are out of date.

    A renderer failure is never fatal: it is logged and recorded as a warning
    on the report, and the build carries on with the next file.
    """
    config: Final[BuildConfig]
    report: Final[BuildReport]

    def __init__(self, config: BuildConfig, report: BuildReport):
        self.config = config
        self.report = report

    def command(self, program: str, source: Path, dest: Path) -> List[str]:
        args = [program, "-o", str(dest)]
        for require in self.config.requires:
            args.extend(("-r", require))
        args.append(str(source))
        return args

    def render(
            self,
            source: Path,
            source_lastmod: datetime | float,
            dest: Path,
            forced: bool = False,
    ) -> None:
        """
        Render ``source`` to ``dest`` if the output is missing, older than the
        source, or ``forced`` is set. With PDF output enabled, the ``.pdf``
        sibling of ``dest`` is checked and rendered independently.

        :param source: Source document.
        :param source_lastmod: Modification time of the source.
        :param dest: HTML output path.
        :param forced: Skip the staleness check.
        """
        forced = forced or self.config.force
        self._run(
            self.config.renderer,
            BuildContext(source, source_lastmod, dest, forced),
        )

        if self.config.pdf:
            self._run(
                self.config.pdf_renderer,
                BuildContext(source, source_lastmod, dest.with_suffix(".pdf"), forced),
            )

    def _run(self, program: str, context: BuildContext) -> None:
        self.report.add_stat(context.build_reason)
        if not context.is_modified:
            logger.debug("%s not modified.", context.dest_path)
            return

        logger.info("Rendering %s (%s).", context.dest_path, context.build_reason.name.lower())
        args = self.command(program, context.source_path, context.dest_path)

        try:
            context.dest_path.parent.mkdir(parents=True, exist_ok=True)
            subprocess.run(args, check=True, capture_output=True, text=True)

        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            logger.warning("Err on %s: %s", context.source_path, detail)
            self.report.warn(context.source_path, f"{program}: {detail}")

        except OSError as e:
            logger.warning("Err on %s: %s", context.source_path, e)
            self.report.warn(context.source_path, f"{program}: {e}")
