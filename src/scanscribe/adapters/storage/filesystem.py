"""Storage adapter using local filesystem."""

import logging
import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path

from ...domain.errors import ConfigurationError
from ...domain.models import SideEffectResult
from ...ports.storage import StoragePort

logger = logging.getLogger(__name__)

COPY_TIMESTAMPS = "copy timestamps to"
DELETE = "delete"


def _set_creation_date(path: Path, created: datetime) -> str | None:
    """Set macOS creation date; returns the error message on failure."""
    try:
        from osxmetadata import OSXMetaData

        md = OSXMetaData(str(path))
        md.kMDItemFSCreationDate = created
    except Exception as e:
        return str(e)
    return None


class FilesystemAdapter(StoragePort):
    """Storage implementation using local filesystem."""

    def prepare_directory(self, path: Path) -> Path:
        if path.exists() and not path.is_dir():
            raise ConfigurationError(f"Output path is not a directory: {path}")
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Unable to create output directory {path}: {e}") from e
        logger.debug(f"Output directory: {path}")
        return path

    def write_text(self, path: Path, text: str) -> Path:
        """Write atomically: temp file in the same directory, then replace."""
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(text)
            # NamedTemporaryFile creates files readable by the owner only
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()

        return path

    def copy_timestamps(self, source: Path, dest: Path) -> SideEffectResult:
        try:
            st = source.stat()
            os.utime(dest, ns=(st.st_atime_ns, st.st_mtime_ns))
        except OSError as e:
            return SideEffectResult(COPY_TIMESTAMPS, dest, str(e))

        if sys.platform == "darwin" and hasattr(st, "st_birthtime"):
            error = _set_creation_date(dest, datetime.fromtimestamp(st.st_birthtime))
            if error:
                return SideEffectResult(COPY_TIMESTAMPS, dest, error)

        return SideEffectResult(COPY_TIMESTAMPS, dest)

    def remove(self, path: Path) -> SideEffectResult:
        try:
            path.unlink()
        except OSError as e:
            return SideEffectResult(DELETE, path, str(e))
        logger.debug(f"Deleted: {path.name}")
        return SideEffectResult(DELETE, path)
