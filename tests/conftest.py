"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import fitz
import pytest
from PIL import Image

from scanscribe.domain.errors import PageRenderError
from scanscribe.domain.models import Document, DocumentKind, TranslationAvailability
from scanscribe.ports.documents import DocumentPort, PageSource
from scanscribe.ports.ocr import OCRPort
from scanscribe.ports.storage import StoragePort
from scanscribe.ports.translation import TranslationPort


class FakePages(PageSource):
    """Page source over prepared images; an exception entry fails that page."""

    def __init__(self, pages: list[Any]) -> None:
        self.pages = pages
        self.rendered: list[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def render_page(self, ordinal: int) -> Any:
        self.rendered.append(ordinal)
        page = self.pages[ordinal - 1]
        if isinstance(page, Exception):
            raise page
        return page

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_pages() -> Callable[..., FakePages]:
    """Build a page source; pass "broken" for a page that fails to render."""

    def factory(*pages: Any) -> FakePages:
        return FakePages(
            [
                PageRenderError(f"Failed to render page #{i}")
                if page == "broken"
                else page
                for i, page in enumerate(pages, start=1)
            ]
        )

    return factory


@pytest.fixture
def mock_ocr() -> MagicMock:
    """Mock OCR port."""
    mock = MagicMock(spec=OCRPort)
    mock.supported_languages.return_value = {"eng", "deu", "fra"}
    mock.recognize.return_value = "Hello\nWorld"
    return mock


@pytest.fixture
def mock_translator() -> MagicMock:
    """Mock translation port."""
    mock = MagicMock(spec=TranslationPort)
    mock.availability.return_value = TranslationAvailability.INSTALLED
    mock.translate.return_value = "Hallo\nWelt"
    return mock


@pytest.fixture
def mock_documents() -> MagicMock:
    """Mock document port classifying by suffix."""

    def classify(path: Path) -> Document:
        if path.suffix == ".pdf":
            return Document(path=path, kind=DocumentKind.MULTI_PAGE, unit_count=None)
        return Document(path=path, kind=DocumentKind.SINGLE_IMAGE)

    mock = MagicMock(spec=DocumentPort)
    mock.classify.side_effect = classify
    mock.load_image.return_value = "image"
    return mock


@pytest.fixture
def mock_storage() -> MagicMock:
    """Mock storage port."""
    mock = MagicMock(spec=StoragePort)
    mock.write_text.side_effect = lambda path, text: path
    return mock


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A small white PNG image."""
    path = tmp_path / "scan.png"
    Image.new("RGB", (64, 32), "white").save(path)
    return path


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    """A two-page PDF with a line of text on each page."""
    path = tmp_path / "letter.pdf"
    doc = fitz.open()
    for number in (1, 2):
        page = doc.new_page()
        page.insert_text((72, 72), f"Page {number}")
    doc.save(path)
    doc.close()
    return path
