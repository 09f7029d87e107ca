"""Ports - interfaces for external dependencies."""

from .documents import DocumentPort, PageSource
from .ocr import OCRPort
from .storage import StoragePort
from .translation import TranslationPort

__all__ = ["DocumentPort", "OCRPort", "PageSource", "StoragePort", "TranslationPort"]
