"""Per-document recognition streams.

A stream is a lazy, ordered iterator of RecognitionResult. Document-level
problems (unreadable file, no pages) raise DocumentError from `open()`
before anything is yielded. Inside a multi-page stream a failing page is
reported and skipped; the stream always runs to the last page.
"""

import logging
from collections.abc import Iterator
from dataclasses import replace

from ..ports.documents import DocumentPort, PageSource
from .errors import DocumentError, UnitError
from .models import Document, DocumentKind, RecognitionResult, Unit
from .recognizer import UnitRecognizer

logger = logging.getLogger(__name__)


class RecognitionStream:
    """Turns documents into streams of recognition results."""

    def __init__(self, documents: DocumentPort, recognizer: UnitRecognizer) -> None:
        self.documents = documents
        self.recognizer = recognizer

    def open(
        self, document: Document, warnings: list[str] | None = None
    ) -> Iterator[RecognitionResult]:
        """Open a stream for document.

        Per-page warnings are appended to `warnings` when given.
        """
        if document.kind == DocumentKind.MULTI_PAGE:
            return self._open_pages(document, warnings)
        return self._open_image(document)

    def _open_image(self, document: Document) -> Iterator[RecognitionResult]:
        image = self.documents.load_image(document)
        return self._recognize_image(Unit(document=document, image=image))

    def _recognize_image(self, unit: Unit) -> Iterator[RecognitionResult]:
        try:
            result = self.recognizer.recognize(unit)
        except UnitError as e:
            # No further units to salvage
            raise DocumentError(
                f"Recognition failed for {unit.document.name}: {e}"
            ) from e
        yield result

    def _open_pages(
        self, document: Document, warnings: list[str] | None
    ) -> Iterator[RecognitionResult]:
        pages = self.documents.open_pages(document)
        count = pages.page_count
        if count == 0:
            pages.close()
            raise DocumentError(f"Document has no pages at {document.path}")

        logger.debug(f"{document.name}: {count} pages")
        return self._recognize_pages(replace(document, unit_count=count), pages, warnings)

    def _recognize_pages(
        self, document: Document, pages: PageSource, warnings: list[str] | None
    ) -> Iterator[RecognitionResult]:
        with pages:
            for ordinal in range(1, pages.page_count + 1):
                try:
                    image = pages.render_page(ordinal)
                    unit = Unit(document=document, image=image, ordinal=ordinal)
                    result = self.recognizer.recognize(unit)
                except UnitError as e:
                    message = (
                        f"Error processing page #{ordinal} of {document.path}: {e}"
                    )
                    logger.warning(message)
                    if warnings is not None:
                        warnings.append(message)
                    continue

                yield result
