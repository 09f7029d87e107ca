"""Document port - interface for classifying and rendering inputs."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.models import Document


class PageSource(ABC):
    """An opened multi-page document."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        pass

    @abstractmethod
    def render_page(self, ordinal: int) -> Any:
        """Render page `ordinal` (1-based) to an image.

        Raises PageRenderError.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "PageSource":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class DocumentPort(ABC):
    """Interface for reading input documents."""

    @abstractmethod
    def classify(self, path: Path) -> "Document":
        """Determine whether path is a single image or a multi-page document.

        Raises DocumentError for missing files and unknown or unsupported types.
        """
        pass

    @abstractmethod
    def load_image(self, document: "Document") -> Any:
        """Decode a single-image document. Raises DocumentError."""
        pass

    @abstractmethod
    def open_pages(self, document: "Document") -> PageSource:
        """Open a multi-page document. Raises DocumentError."""
        pass
