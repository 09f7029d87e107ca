"""Unit tests for recognition language validation."""

import pytest

from scanscribe.domain.errors import UnsupportedLanguageError
from scanscribe.domain.languages import validate_languages


class TestValidateLanguages:
    """Tests for validate_languages."""

    def test_empty_request_is_auto(self) -> None:
        spec = validate_languages([], set())
        assert spec.is_auto

    def test_supported_codes_keep_order(self) -> None:
        spec = validate_languages(["fra", "eng"], {"eng", "deu", "fra"})
        assert spec.codes == ("fra", "eng")

    def test_names_first_unsupported_code(self) -> None:
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            validate_languages(["eng", "xx", "yy"], {"eng", "deu"})

        assert exc_info.value.language == "xx"
        assert exc_info.value.supported == ["deu", "eng"]
        assert 'Unsupported language "xx"' in str(exc_info.value)

    def test_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedLanguageError):
            validate_languages(["ENG"], {"eng"})
