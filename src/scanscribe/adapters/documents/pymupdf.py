"""Document adapter using PyMuPDF for PDFs and Pillow for images."""

import logging
import mimetypes
from pathlib import Path

import fitz  # PyMuPDF
from PIL import Image

from ...domain.errors import DocumentError, PageRenderError
from ...domain.models import Document, DocumentKind
from ...ports.documents import DocumentPort, PageSource

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
# Modes Tesseract reads directly
OCR_IMAGE_MODES = {"RGB", "L"}


def _for_ocr(image: Image.Image) -> Image.Image:
    if image.mode in OCR_IMAGE_MODES:
        return image
    return image.convert("RGB")


class PyMuPdfPages(PageSource):
    """Pages of an opened PDF, rendered on demand."""

    def __init__(self, doc: fitz.Document, path: Path, dpi: int) -> None:
        self.doc = doc
        self.path = path
        self.dpi = dpi

    @property
    def page_count(self) -> int:
        return self.doc.page_count

    def render_page(self, ordinal: int) -> Image.Image:
        if not 1 <= ordinal <= self.doc.page_count:
            raise PageRenderError(f"Page #{ordinal} not found")
        try:
            page = self.doc.load_page(ordinal - 1)
            pix = page.get_pixmap(dpi=self.dpi, alpha=False)
            return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
        except Exception as e:
            # MuPDF raises its own exception types depending on version
            raise PageRenderError(f"Failed to render page #{ordinal}: {e}") from e

    def close(self) -> None:
        self.doc.close()


class PyMuPdfAdapter(DocumentPort):
    """Classifies inputs by type and decodes them for recognition."""

    def __init__(self, dpi: int = 200) -> None:
        self.dpi = dpi

    def classify(self, path: Path) -> Document:
        if not path.exists():
            raise DocumentError(f"Document doesn't exist at {path}")
        if not path.is_file():
            raise DocumentError(f"Not a file: {path}")

        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type is None:
            raise DocumentError(f"Unable to determine file type at {path}")
        if mime_type == PDF_MIME_TYPE:
            return Document(path=path, kind=DocumentKind.MULTI_PAGE, unit_count=None)
        if mime_type.startswith("image/"):
            return Document(path=path, kind=DocumentKind.SINGLE_IMAGE)

        raise DocumentError(f"File at {path} is not an image or PDF ({mime_type})")

    def load_image(self, document: Document) -> Image.Image:
        try:
            with Image.open(document.path) as image:
                image.load()
                return _for_ocr(image.copy())
        except (OSError, Image.DecompressionBombError) as e:
            # OSError covers missing files and PIL.UnidentifiedImageError
            raise DocumentError(f"Couldn't read image at {document.path}: {e}") from e

    def open_pages(self, document: Document) -> PyMuPdfPages:
        try:
            doc = fitz.open(document.path)
        except Exception as e:
            raise DocumentError(f"Failed to read PDF at {document.path}: {e}") from e
        return PyMuPdfPages(doc, document.path, self.dpi)
