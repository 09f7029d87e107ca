"""Document adapters."""

from .pymupdf import PyMuPdfAdapter, PyMuPdfPages

__all__ = ["PyMuPdfAdapter", "PyMuPdfPages"]
