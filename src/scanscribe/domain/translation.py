"""Optional translation of recognized text."""

import logging

from ..ports.translation import TranslationPort
from .errors import ConfigurationError, TranslationError
from .models import (
    LanguageSpec,
    RecognitionResult,
    TranslationAvailability,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class TranslationStep:
    """Translates recognition results from the single recognition language."""

    def __init__(
        self, translator: TranslationPort, languages: LanguageSpec, target: str
    ) -> None:
        source = languages.source_language
        if source is None:
            raise ConfigurationError(
                "Translation requires exactly one --language to translate from"
            )
        self.translator = translator
        self.source = source
        self.target = target

    def check(self) -> None:
        """Fail the run early unless the language pair is ready to use."""
        status = self.translator.availability(self.source, self.target)
        logger.debug(f"Translation {self.source} -> {self.target}: {status.value}")

        if status == TranslationAvailability.UNSUPPORTED:
            raise ConfigurationError(
                f"Translation from {self.source} to {self.target} is not supported"
            )
        if status == TranslationAvailability.SUPPORTED:
            raise ConfigurationError(
                f"Translation from {self.source} to {self.target} is supported, "
                "but the required languages or models are not installed"
            )

    def apply(self, result: RecognitionResult) -> TranslationResult | None:
        """Translate one result; None when this call failed."""
        if not result.text.strip():
            translated = result.text
        else:
            try:
                translated = self.translator.translate(
                    result.text, self.source, self.target
                )
            except TranslationError as e:
                logger.warning(
                    f"Translation failed for {result.suggested_filename}: {e}"
                )
                return None

        return TranslationResult(
            source_text=result.text,
            translated_text=translated,
            input_language=self.source,
            output_language=self.target,
        )
