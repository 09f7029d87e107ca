"""Domain layer - core business logic."""

from .models import (
    DirectoryTarget,
    Document,
    DocumentKind,
    LanguageSpec,
    RecognitionMode,
    RecognitionResult,
    StdoutTarget,
    TranslationAvailability,
    TranslationResult,
)

__all__ = [
    "DirectoryTarget",
    "Document",
    "DocumentKind",
    "LanguageSpec",
    "RecognitionMode",
    "RecognitionResult",
    "StdoutTarget",
    "TranslationAvailability",
    "TranslationResult",
]
