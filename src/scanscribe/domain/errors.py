"""Domain errors.

Run-level configuration errors abort before any document is touched,
document errors abort one document, unit errors abort one page.
"""


class ScanscribeError(Exception):
    """Base error for scanscribe."""


class ConfigurationError(ScanscribeError):
    """Invalid run configuration (languages, translation, output path)."""


class UnsupportedLanguageError(ConfigurationError):
    """Requested recognition language is not supported by the engine."""

    def __init__(self, language: str, supported: list[str]) -> None:
        self.language = language
        self.supported = supported
        super().__init__(
            f'Unsupported language "{language}". '
            f"Supported languages are: {', '.join(supported)}"
        )


class DocumentError(ScanscribeError):
    """A whole document could not be processed."""


class UnitError(ScanscribeError):
    """A single image or page could not be recognized."""


class PageRenderError(UnitError):
    """A page could not be rendered to an image."""


class RecognitionFailure(UnitError):
    """The recognition engine failed on a unit."""


class NoResultsError(UnitError):
    """The recognition engine returned no observations."""

    def __init__(self, message: str = "No results") -> None:
        super().__init__(message)


class TranslationError(ScanscribeError):
    """A single translation call failed."""
