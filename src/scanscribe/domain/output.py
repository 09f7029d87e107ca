"""Output routing for recognition and translation results."""

import logging
from pathlib import Path
from typing import TextIO

import click

from ..ports.storage import StoragePort
from .errors import DocumentError
from .models import (
    DirectoryTarget,
    EmitRecord,
    OutputTarget,
    RecognitionResult,
    SideEffectResult,
    StdoutTarget,
    TranslationResult,
)

logger = logging.getLogger(__name__)


def text_filename(stem: str, language: str | None = None) -> str:
    """Build `<stem>.txt` or `<stem>_<language>.txt`."""
    if language:
        return f"{stem}_{language}.txt"
    return f"{stem}.txt"


class OutputRouter:
    """Prints results or writes them as text files next to each other."""

    def __init__(
        self,
        target: OutputTarget,
        storage: StoragePort,
        delete_originals: bool = False,
        suppress_original_on_stdout: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.target = target
        self.storage = storage
        self.delete_originals = delete_originals
        self.suppress_original_on_stdout = suppress_original_on_stdout
        self.stream = stream

    def prepare(self) -> None:
        """Create the output directory before any document is processed."""
        if isinstance(self.target, DirectoryTarget):
            self.storage.prepare_directory(self.target.path)

    def emit(
        self,
        result: RecognitionResult,
        translation: TranslationResult | None,
        source_path: Path,
    ) -> EmitRecord:
        if isinstance(self.target, StdoutTarget):
            return self._print(result, translation)
        elif isinstance(self.target, DirectoryTarget):
            return self._write(result, translation, source_path, self.target.path)
        else:
            raise TypeError(f"Unknown output target: {self.target!r}")

    def _print(
        self, result: RecognitionResult, translation: TranslationResult | None
    ) -> EmitRecord:
        name = result.document.name
        suppress = (
            translation is not None
            and self.delete_originals
            and self.suppress_original_on_stdout
        )
        if not suppress:
            self._echo(f"{name}:\n{result.text}\n")
        if translation is not None:
            self._echo(
                f"{name} ({translation.output_language}):\n"
                f"{translation.translated_text}\n"
            )
        return EmitRecord()

    def _echo(self, block: str) -> None:
        click.echo(block, file=self.stream, nl=False)

    def _write(
        self,
        result: RecognitionResult,
        translation: TranslationResult | None,
        source_path: Path,
        directory: Path,
    ) -> EmitRecord:
        record = EmitRecord()

        original = self._write_file(
            directory / text_filename(result.suggested_filename), result.text
        )
        record.written.append(original)
        self._check(self.storage.copy_timestamps(source_path, original), record)

        if translation is None:
            return record

        translated = self._write_file(
            directory
            / text_filename(result.suggested_filename, translation.output_language),
            translation.translated_text,
        )
        record.written.append(translated)
        self._check(self.storage.copy_timestamps(source_path, translated), record)

        if self.delete_originals:
            removal = self.storage.remove(original)
            if self._check(removal, record):
                record.written.remove(original)
                record.removed.append(original)

        return record

    def _write_file(self, path: Path, text: str) -> Path:
        try:
            written = self.storage.write_text(path, text)
        except OSError as e:
            raise DocumentError(f"Failed to write {path}: {e}") from e
        logger.debug(f"Wrote {written}")
        return written

    def _check(self, outcome: SideEffectResult, record: EmitRecord) -> bool:
        """Log a failed best-effort side effect; never raises."""
        if outcome.ok:
            return True
        message = f"Failed to {outcome.action} {outcome.path.name}: {outcome.error}"
        logger.warning(message)
        record.warnings.append(message)
        return False
