import logging, sys, click
from .log import configure_logging
from .config import BuildConfig, DEFAULT_EXCLUDE, DEFAULT_MEDIA
from .build import build as build_site
from .exec import BuildException
from . import __version__

logger = logging.getLogger(__name__)


@click.group()
@click.option('--verbose', '-v', is_flag=True, default=False)
@click.version_option(version=__version__)
def cli(verbose: bool) -> None:
    configure_logging(verbose, color=sys.stderr.isatty())


@cli.command(help="Build the wiki.")
@click.option(
    "--path",
    default="./",
    show_default=True,
    help="Path to the root of your wiki src"
)
@click.option(
    "--out",
    default="./html",
    show_default=True,
    help="Path to the output"
)
@click.option('--pdf', is_flag=True, default=False, help="Render PDFs")
@click.option(
    "--exclude",
    default=DEFAULT_EXCLUDE,
    show_default=True,
    help="Comma separated names to leave out of the build"
)
@click.option(
    "--media",
    default=DEFAULT_MEDIA,
    show_default=True,
    help="Comma separated directory names designated as media (to be copied)"
)
@click.option(
    "--require", "-r",
    "requires",
    multiple=True,
    help="Passed to the renderer as -r, may be repeated"
)
@click.option(
    '--force',
    help="Build all pages, even if unmodified",
    is_flag=True,
    default=False
)
@click.option("--renderer", default="asciidoctor", show_default=True)
@click.option("--pdf-renderer", default="asciidoctor-pdf", show_default=True)
def build(
        path: str,
        out: str,
        pdf: bool,
        exclude: str,
        media: str,
        requires: tuple[str, ...],
        force: bool,
        renderer: str,
        pdf_renderer: str,
):
    config = BuildConfig.from_options(
        path,
        out,
        exclude=exclude,
        media=media,
        requires=requires,
        pdf=pdf,
        force=force,
        renderer=renderer,
        pdf_renderer=pdf_renderer,
    )

    try:
        report = build_site(config)
    except BuildException as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info(report.summary())


if __name__ == "__main__":
    cli()
