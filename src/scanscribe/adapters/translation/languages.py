"""Language names for translation prompts.

Recognition uses Tesseract's three-letter codes (deu, eng); users may pass
either those or two-letter ISO 639-1 codes to --translate.
"""

_LANGUAGES = [
    # (ISO 639-1, Tesseract code, English name)
    ("ar", "ara", "Arabic"),
    ("bg", "bul", "Bulgarian"),
    ("cs", "ces", "Czech"),
    ("da", "dan", "Danish"),
    ("de", "deu", "German"),
    ("el", "ell", "Greek"),
    ("en", "eng", "English"),
    ("es", "spa", "Spanish"),
    ("et", "est", "Estonian"),
    ("fi", "fin", "Finnish"),
    ("fr", "fra", "French"),
    ("he", "heb", "Hebrew"),
    ("hi", "hin", "Hindi"),
    ("hr", "hrv", "Croatian"),
    ("hu", "hun", "Hungarian"),
    ("id", "ind", "Indonesian"),
    ("it", "ita", "Italian"),
    ("ja", "jpn", "Japanese"),
    ("ko", "kor", "Korean"),
    ("lt", "lit", "Lithuanian"),
    ("lv", "lav", "Latvian"),
    ("nl", "nld", "Dutch"),
    ("no", "nor", "Norwegian"),
    ("pl", "pol", "Polish"),
    ("pt", "por", "Portuguese"),
    ("ro", "ron", "Romanian"),
    ("ru", "rus", "Russian"),
    ("sk", "slk", "Slovak"),
    ("sl", "slv", "Slovenian"),
    ("sv", "swe", "Swedish"),
    ("th", "tha", "Thai"),
    ("tr", "tur", "Turkish"),
    ("uk", "ukr", "Ukrainian"),
    ("vi", "vie", "Vietnamese"),
    ("zh", "chi_sim", "Simplified Chinese"),
    ("zh-Hant", "chi_tra", "Traditional Chinese"),
]

LANGUAGE_NAMES: dict[str, str] = {}
for _short, _tesseract, _name in _LANGUAGES:
    LANGUAGE_NAMES[_short] = _name
    LANGUAGE_NAMES[_tesseract] = _name


def language_name(code: str) -> str | None:
    """English name for a language code, or None if unknown."""
    return LANGUAGE_NAMES.get(code)


def is_supported_pair(source: str, target: str) -> bool:
    source_name = language_name(source)
    target_name = language_name(target)
    return bool(source_name and target_name and source_name != target_name)
