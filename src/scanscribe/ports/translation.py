"""Translation port - interface for machine translation."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import TranslationAvailability


class TranslationPort(ABC):
    """Interface for a translation provider."""

    @abstractmethod
    def availability(self, source: str, target: str) -> "TranslationAvailability":
        """Report whether source -> target can be translated right now."""
        pass

    @abstractmethod
    def translate(self, text: str, source: str, target: str) -> str:
        """Translate text. Raises TranslationError."""
        pass
