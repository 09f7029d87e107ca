"""Domain services - orchestrate business logic."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..ports.documents import DocumentPort
from ..ports.ocr import OCRPort
from ..ports.translation import TranslationPort
from .errors import DocumentError
from .languages import validate_languages
from .models import (
    Document,
    DocumentKind,
    DocumentOutcome,
    DocumentReport,
    FailurePolicy,
    LanguageSpec,
    RecognitionMode,
    RunReport,
)
from .output import OutputRouter
from .recognizer import UnitRecognizer
from .stream import RecognitionStream
from .translation import TranslationStep

logger = logging.getLogger(__name__)


class BatchService:
    """Orchestrates a batch run over a list of input documents."""

    def __init__(
        self,
        ocr: OCRPort,
        documents: DocumentPort,
        router: OutputRouter,
        languages: Sequence[str] = (),
        mode: RecognitionMode = RecognitionMode.ACCURATE,
        translator: TranslationPort | None = None,
        target_language: str | None = None,
        fallback_to_image: bool = False,
    ) -> None:
        self.ocr = ocr
        self.documents = documents
        self.router = router
        self.languages = list(languages)
        self.mode = mode
        self.translator = translator
        self.target_language = target_language
        self.fallback_to_image = fallback_to_image

    def validate(self) -> tuple[LanguageSpec, TranslationStep | None]:
        """Check the whole run configuration before touching any input.

        Raises ConfigurationError.
        """
        if self.languages:
            languages = validate_languages(self.languages, self.ocr.supported_languages())
        else:
            languages = LanguageSpec()

        translation = None
        if self.target_language:
            if self.translator is None:
                raise ValueError("target_language requires a translator")
            translation = TranslationStep(self.translator, languages, self.target_language)
            translation.check()
        elif self.router.delete_originals:
            logger.warning("--delete-originals has no effect without --translate")

        self.router.prepare()
        return languages, translation

    def run(
        self, paths: Sequence[Path], policy: FailurePolicy | None = None
    ) -> RunReport:
        """Process every path in order.

        Pipeline:
            1. Validate languages, translation and output target
            2. Classify each document
            3. Recognize, translate (optional) and output each result

        A document-level failure aborts the run only under
        policy.abort_on_first_failure (default: exactly one input).
        """
        policy = policy or FailurePolicy.for_inputs(len(paths))
        languages, translation = self.validate()

        logger.info("Validating documents…")
        classified = [self._classify(path) for path in paths]

        if languages.is_auto:
            logger.info("Performing OCR…")
        elif len(languages.codes) == 1:
            logger.info(f"Performing OCR with language: {languages}…")
        else:
            logger.info(f"Performing OCR with languages: {languages}…")

        stream = RecognitionStream(
            self.documents, UnitRecognizer(self.ocr, languages, self.mode)
        )
        report = RunReport()

        for path, document, error in classified:
            if error is not None:
                doc_report = DocumentReport(source_path=path, error=str(error))
                report.documents.append(doc_report)
                self._on_failure(doc_report, error, policy)
                continue

            doc_report = DocumentReport(source_path=path)
            report.documents.append(doc_report)
            try:
                self._process(document, stream, translation, doc_report)
            except DocumentError as e:
                doc_report.error = str(e)
                self._on_failure(doc_report, e, policy)

        logger.info(
            f"Processed {len(report.documents)} documents: "
            f"{report.count(DocumentOutcome.COMPLETED)} completed, "
            f"{report.count(DocumentOutcome.COMPLETED_WITH_WARNINGS)} with warnings, "
            f"{report.count(DocumentOutcome.ABORTED)} failed"
        )
        return report

    def _classify(
        self, path: Path
    ) -> tuple[Path, Document | None, DocumentError | None]:
        try:
            return path, self.documents.classify(path), None
        except DocumentError as e:
            logger.warning(str(e))
            if self.fallback_to_image:
                logger.warning(f"Attempting {path.name} as an image")
                return path, Document(path=path, kind=DocumentKind.SINGLE_IMAGE), None
            return path, None, e

    def _process(
        self,
        document: Document,
        stream: RecognitionStream,
        translation: TranslationStep | None,
        doc_report: DocumentReport,
    ) -> None:
        logger.debug(f"Processing: {document.name} ({document.kind.value})")

        for result in stream.open(document, doc_report.warnings):
            translated = None
            if translation is not None:
                translated = translation.apply(result)
                if translated is None:
                    doc_report.warnings.append(
                        f"Translation skipped for {result.suggested_filename}"
                    )

            record = self.router.emit(result, translated, document.path)
            doc_report.written.extend(record.written)
            doc_report.warnings.extend(record.warnings)

    def _on_failure(
        self,
        doc_report: DocumentReport,
        error: DocumentError,
        policy: FailurePolicy,
    ) -> None:
        if policy.abort_on_first_failure:
            raise error
        logger.warning(f"OCR failed for {doc_report.source_path.name}: {doc_report.error}")
