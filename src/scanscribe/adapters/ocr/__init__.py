"""OCR adapters."""

from ...config import OCRConfig
from ...ports.ocr import OCRPort
from .tesseract import TesseractAdapter

__all__ = ["TesseractAdapter", "create_ocr_adapter"]


def create_ocr_adapter(config: OCRConfig) -> OCRPort:
    """Create OCR adapter based on configuration."""
    return TesseractAdapter(
        tesseract_cmd=config.tesseract_cmd,
        accurate_config=config.accurate_config,
        fast_config=config.fast_config,
        timeout=config.timeout,
    )
