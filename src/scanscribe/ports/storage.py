"""Storage port - interface for writing text artifacts."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import SideEffectResult


class StoragePort(ABC):
    """Interface for output file handling."""

    @abstractmethod
    def prepare_directory(self, path: Path) -> Path:
        """Create the output directory if absent.

        Raises ConfigurationError when it cannot be used.
        """
        pass

    @abstractmethod
    def write_text(self, path: Path, text: str) -> Path:
        """Write text to path, replacing any existing file.

        Returns path to written file.
        """
        pass

    @abstractmethod
    def copy_timestamps(self, source: Path, dest: Path) -> "SideEffectResult":
        """Copy creation/modification times from source onto dest."""
        pass

    @abstractmethod
    def remove(self, path: Path) -> "SideEffectResult":
        """Delete a file."""
        pass
