"""OCR port - interface for text recognition."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.models import LanguageSpec, RecognitionMode


class OCRPort(ABC):
    """Interface for the text recognition engine."""

    @abstractmethod
    def supported_languages(self) -> set[str]:
        """Return every language code the engine can recognize."""
        pass

    @abstractmethod
    def recognize(
        self, image: Any, mode: "RecognitionMode", languages: "LanguageSpec"
    ) -> str:
        """Recognize text on one image, one line per detected text line.

        Raises RecognitionFailure or NoResultsError.
        """
        pass
