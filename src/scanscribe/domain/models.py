"""Domain models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

STDOUT_MARKER = "-"


class DocumentKind(str, Enum):
    """How a document is split into recognizable units."""

    SINGLE_IMAGE = "single-image"
    MULTI_PAGE = "multi-page"


class RecognitionMode(str, Enum):
    """Recognition accuracy/speed trade-off."""

    ACCURATE = "accurate"
    FAST = "fast"


class TranslationAvailability(str, Enum):
    """Whether a language pair can be translated right now."""

    SUPPORTED = "supported-needs-install"
    INSTALLED = "installed"
    UNSUPPORTED = "unsupported"


class DocumentOutcome(str, Enum):
    COMPLETED = "completed"
    COMPLETED_WITH_WARNINGS = "completed-with-warnings"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Document:
    """One classified input path."""

    path: Path
    kind: DocumentKind
    unit_count: int | None = 1  # None until a multi-page document is opened

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def basename(self) -> str:
        return self.path.stem


@dataclass(frozen=True)
class Unit:
    """One renderable surface: a whole image or a single page."""

    document: Document
    image: Any
    ordinal: int | None = None  # 1-based page number, None for images

    @property
    def suggested_filename(self) -> str:
        if self.ordinal is None:
            return self.document.basename
        return f"{self.document.basename}-{self.ordinal}"


@dataclass(frozen=True)
class RecognitionResult:
    """Text recognized from one unit."""

    text: str
    suggested_filename: str
    document: Document
    ordinal: int | None = None


@dataclass(frozen=True)
class TranslationResult:
    source_text: str
    translated_text: str
    input_language: str
    output_language: str


@dataclass(frozen=True)
class LanguageSpec:
    """Requested recognition languages; empty means auto-detect."""

    codes: tuple[str, ...] = ()

    @property
    def is_auto(self) -> bool:
        return not self.codes

    @property
    def source_language(self) -> str | None:
        """The single requested language, if exactly one was given."""
        return self.codes[0] if len(self.codes) == 1 else None

    def __str__(self) -> str:
        return ", ".join(self.codes)


@dataclass(frozen=True)
class StdoutTarget:
    """Print results to standard output."""


@dataclass(frozen=True)
class DirectoryTarget:
    """Write results as text files into a directory."""

    path: Path


OutputTarget = StdoutTarget | DirectoryTarget


def resolve_output_target(value: str) -> OutputTarget:
    """Resolve the --output argument ("-" or a directory path)."""
    if value == STDOUT_MARKER:
        return StdoutTarget()
    return DirectoryTarget(Path(value).expanduser().absolute())


@dataclass(frozen=True)
class SideEffectResult:
    """Outcome of a best-effort side effect (timestamp copy, deletion)."""

    action: str
    path: Path
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class EmitRecord:
    """Artifacts produced for one recognition result."""

    written: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class DocumentReport:
    """Result of processing one document."""

    source_path: Path
    written: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def outcome(self) -> DocumentOutcome:
        if self.error is not None:
            return DocumentOutcome.ABORTED
        if self.warnings:
            return DocumentOutcome.COMPLETED_WITH_WARNINGS
        return DocumentOutcome.COMPLETED


@dataclass
class RunReport:
    """Result of one run over the input list."""

    documents: list[DocumentReport] = field(default_factory=list)

    def count(self, outcome: DocumentOutcome) -> int:
        return sum(1 for d in self.documents if d.outcome == outcome)


@dataclass(frozen=True)
class FailurePolicy:
    """What a document-level failure does to the rest of the run."""

    abort_on_first_failure: bool = False

    @classmethod
    def for_inputs(cls, count: int) -> "FailurePolicy":
        # A lone input has nothing left to salvage
        return cls(abort_on_first_failure=count == 1)
