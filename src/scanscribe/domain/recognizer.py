"""Unit recognition - one image or page in, one result out."""

import logging

from ..ports.ocr import OCRPort
from .errors import RecognitionFailure, UnitError
from .models import LanguageSpec, RecognitionMode, RecognitionResult, Unit

logger = logging.getLogger(__name__)


class UnitRecognizer:
    """Runs the OCR engine on a single unit."""

    def __init__(
        self,
        ocr: OCRPort,
        languages: LanguageSpec,
        mode: RecognitionMode = RecognitionMode.ACCURATE,
    ) -> None:
        self.ocr = ocr
        self.languages = languages
        self.mode = mode

    def recognize(self, unit: Unit) -> RecognitionResult:
        """Recognize text on unit.

        Blocks until the engine responds. Engine errors surface as UnitError
        subclasses; anything else an adapter lets through is wrapped in
        RecognitionFailure.
        """
        logger.debug(f"Recognizing {unit.suggested_filename} ({self.mode.value})")
        try:
            text = self.ocr.recognize(unit.image, self.mode, self.languages)
        except UnitError:
            raise
        except Exception as e:
            raise RecognitionFailure(str(e)) from e

        return RecognitionResult(
            text=text,
            suggested_filename=unit.suggested_filename,
            document=unit.document,
            ordinal=unit.ordinal,
        )
