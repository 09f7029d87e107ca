"""Recognition language validation."""

from collections.abc import Iterable, Sequence

from .errors import UnsupportedLanguageError
from .models import LanguageSpec


def validate_languages(requested: Sequence[str], supported: Iterable[str]) -> LanguageSpec:
    """Check requested codes against the engine's supported set.

    An empty request means auto-detect and is always valid. Raises
    UnsupportedLanguageError naming the first unsupported code.
    """
    spec = LanguageSpec(tuple(requested))
    if spec.is_auto:
        return spec

    available = set(supported)
    for code in spec.codes:
        if code not in available:
            raise UnsupportedLanguageError(code, sorted(available))
    return spec
