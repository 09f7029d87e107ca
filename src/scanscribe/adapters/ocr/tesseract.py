"""OCR adapter using Tesseract via pytesseract."""

import logging
from typing import Any

import pytesseract

from ...domain.errors import ConfigurationError, NoResultsError, RecognitionFailure
from ...domain.models import LanguageSpec, RecognitionMode
from ...ports.ocr import OCRPort

logger = logging.getLogger(__name__)

WORD_LEVEL = 5
# Tesseract lists its orientation/script model among the languages
NON_LANGUAGE_MODELS = {"osd", "equ"}


def lines_from_data(data: dict[str, list[Any]]) -> list[str]:
    """Group word rows of `image_to_data` output into text lines.

    Lines keep Tesseract's reading order; empty words and empty lines are
    dropped.
    """
    lines: dict[tuple[int, int, int, int], list[str]] = {}
    for i, level in enumerate(data.get("level", [])):
        if int(level) != WORD_LEVEL:
            continue
        word = str(data["text"][i] or "").strip()
        if not word:
            continue
        key = (
            int(data["page_num"][i]),
            int(data["block_num"][i]),
            int(data["par_num"][i]),
            int(data["line_num"][i]),
        )
        lines.setdefault(key, []).append(word)
    return [" ".join(words) for words in lines.values()]


class TesseractAdapter(OCRPort):
    """OCR implementation using the tesseract binary."""

    def __init__(
        self,
        tesseract_cmd: str | None = None,
        accurate_config: str = "--oem 1 --psm 3",
        fast_config: str = "--oem 1 --psm 6",
        timeout: float = 0,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.configs = {
            RecognitionMode.ACCURATE: accurate_config,
            RecognitionMode.FAST: fast_config,
        }
        self.timeout = timeout

    def supported_languages(self) -> set[str]:
        try:
            languages = pytesseract.get_languages(config="")
        except pytesseract.TesseractNotFoundError as e:
            raise ConfigurationError(f"Tesseract not found: {e}") from e
        except pytesseract.TesseractError as e:
            raise ConfigurationError(f"Unable to list Tesseract languages: {e}") from e
        return set(languages) - NON_LANGUAGE_MODELS

    def recognize(
        self, image: Any, mode: RecognitionMode, languages: LanguageSpec
    ) -> str:
        lang = "+".join(languages.codes) or None
        try:
            data = pytesseract.image_to_data(
                image,
                lang=lang,
                config=self.configs[mode],
                timeout=self.timeout,
                output_type=pytesseract.Output.DICT,
            )
        except pytesseract.TesseractNotFoundError as e:
            raise RecognitionFailure(f"Tesseract not found: {e}") from e
        except RuntimeError as e:
            # TesseractError and the process timeout are both RuntimeErrors
            raise RecognitionFailure(str(e)) from e

        if not data or not data.get("level"):
            raise NoResultsError()

        lines = lines_from_data(data)
        logger.debug(f"Recognized {len(lines)} lines")
        return "\n".join(lines)
