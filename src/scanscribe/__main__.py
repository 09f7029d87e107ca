"""CLI entry point for scanscribe."""

import logging
import sys
import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from .adapters.documents import PyMuPdfAdapter
from .adapters.ocr import create_ocr_adapter
from .adapters.storage import FilesystemAdapter
from .adapters.translation import create_translation_adapter
from .config import Settings, load_settings
from .domain.errors import ScanscribeError
from .domain.models import RecognitionMode, resolve_output_target
from .domain.output import OutputRouter
from .domain.services import BatchService

logger = logging.getLogger(__name__)

NOISY_LOGGERS = ("httpx", "httpcore", "anthropic")


def setup_logging(verbose: bool = False) -> None:
    logging.addLevelName(logging.WARNING, "WARN")
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    if not verbose:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def build_service(
    settings: Settings,
    output: str,
    languages: tuple[str, ...],
    target_language: str | None,
    delete_originals: bool,
    fast: bool,
) -> BatchService:
    """Wire up adapters for one run."""
    router = OutputRouter(
        target=resolve_output_target(output),
        storage=FilesystemAdapter(),
        delete_originals=delete_originals,
        suppress_original_on_stdout=settings.output.suppress_original_on_stdout,
    )
    return BatchService(
        ocr=create_ocr_adapter(settings.ocr),
        documents=PyMuPdfAdapter(dpi=settings.ocr.render_dpi),
        router=router,
        languages=languages,
        mode=RecognitionMode.FAST if fast else RecognitionMode.ACCURATE,
        translator=create_translation_adapter(settings.translation)
        if target_language
        else None,
        target_language=target_language,
        fallback_to_image=settings.processing.fallback_to_image,
    )


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    default="-",
    show_default=True,
    help="Directory where the txt files will be written to, or - for standard output",
)
@click.option(
    "-l",
    "--language",
    "languages",
    multiple=True,
    help="Language code to use for recognition, can be repeated",
)
@click.option(
    "-t",
    "--translate",
    "target_language",
    help="Translate recognized text to this language (requires exactly one --language)",
)
@click.option(
    "-d", "--delete-originals", is_flag=True, help="Keep only the translated output"
)
@click.option("-f", "--fast", is_flag=True, help="Faster, less accurate recognition")
@click.option("-c", "--config", type=click.Path(exists=True, path_type=Path), help="Config file path")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    paths: tuple[Path, ...],
    output: str,
    languages: tuple[str, ...],
    target_language: str | None,
    delete_originals: bool,
    fast: bool,
    config: Path | None,
    verbose: bool,
) -> None:
    """Extract text from images and PDF documents with OCR."""
    setup_logging(verbose)

    try:
        settings = load_settings(config)
    except (ValidationError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    service = build_service(
        settings, output, languages, target_language, delete_originals, fast
    )

    try:
        service.run([path.expanduser() for path in paths])
    except ScanscribeError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
