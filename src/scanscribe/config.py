"""Configuration management using pydantic-settings."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH = Path("~/.config/scanscribe/config.toml").expanduser()


class TranslationProvider(str, Enum):
    """Available translation providers."""

    OLLAMA = "ollama"
    CLAUDE_API = "claude-api"
    CLAUDE_CLI = "claude-cli"


class OCRConfig(BaseSettings):
    """Tesseract and page rendering configuration."""

    model_config = SettingsConfigDict(env_prefix="SCANSCRIBE_OCR_")

    tesseract_cmd: str | None = None
    accurate_config: str = "--oem 1 --psm 3"
    fast_config: str = "--oem 1 --psm 6"
    render_dpi: int = Field(default=200, ge=72, le=600)
    timeout: float = Field(default=0, ge=0)  # seconds per unit, 0 = none

    @field_validator("tesseract_cmd", mode="before")
    @classmethod
    def expand_path(cls, v: str | None) -> str | None:
        return str(Path(v).expanduser()) if v else None


class TranslationConfig(BaseSettings):
    """Translation provider configuration."""

    model_config = SettingsConfigDict(env_prefix="SCANSCRIBE_TRANSLATION_")

    provider: TranslationProvider = TranslationProvider.OLLAMA
    model: str = "gemma3:4b"
    claude_model: str = "claude-sonnet-4-20250514"
    ollama_url: str = "http://localhost:11434"
    timeout: float = Field(default=120.0, ge=0)  # 0 = none

    @field_validator("ollama_url")
    @classmethod
    def check_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"ollama_url must be http(s): {v}")
        return v


class OutputConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCANSCRIBE_OUTPUT_")

    # Only print the translation on stdout when --delete-originals is given
    suppress_original_on_stdout: bool = True


class ProcessingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCANSCRIBE_PROCESSING_")

    # Process unclassifiable inputs as images instead of failing them
    fallback_to_image: bool = False


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCANSCRIBE_")

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    translation: TranslationConfig = Field(default_factory=TranslationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        ocr = OCRConfig(**data.get("ocr", {}))
        translation = TranslationConfig(**data.get("translation", {}))
        output = OutputConfig(**data.get("output", {}))
        processing = ProcessingConfig(**data.get("processing", {}))
        return Settings(
            ocr=ocr, translation=translation, output=output, processing=processing
        )

    return Settings()
