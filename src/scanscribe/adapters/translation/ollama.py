"""Translation adapter using Ollama."""

import logging
from urllib.parse import urlparse

import httpx

from ...domain.errors import TranslationError
from ...domain.models import TranslationAvailability
from ...ports.translation import TranslationPort
from .languages import is_supported_pair, language_name
from .prompts import system_prompt
from .validation import clean_translation, wrap_document

logger = logging.getLogger(__name__)

TAGS_TIMEOUT = 10.0


class OllamaAdapter(TranslationPort):
    """Translation implementation using a local Ollama server."""

    def __init__(
        self,
        model: str = "gemma3:4b",
        base_url: str = "http://localhost:11434",
        timeout: float | None = 120.0,
    ) -> None:
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"Invalid ollama_url scheme: {parsed.scheme}")
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def availability(self, source: str, target: str) -> TranslationAvailability:
        if not is_supported_pair(source, target):
            return TranslationAvailability.UNSUPPORTED

        try:
            response = httpx.get(f"{self.base_url}/api/tags", timeout=TAGS_TIMEOUT)
            response.raise_for_status()
            models = {m.get("name") for m in response.json().get("models", [])}
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Ollama not reachable at {self.base_url}: {e}")
            return TranslationAvailability.SUPPORTED

        if self.model not in models and f"{self.model}:latest" not in models:
            logger.warning(f"Model {self.model} is not installed, run: ollama pull {self.model}")
            return TranslationAvailability.SUPPORTED

        return TranslationAvailability.INSTALLED

    def translate(self, text: str, source: str, target: str) -> str:
        logger.debug(f"Translating {len(text)} characters with Ollama ({self.model})")

        try:
            response = httpx.post(
                f"{self.base_url}/api/chat",
                json={
                    "model": self.model,
                    "messages": [
                        {
                            "role": "system",
                            "content": system_prompt(
                                language_name(source) or source,
                                language_name(target) or target,
                            ),
                        },
                        {"role": "user", "content": wrap_document(text)},
                    ],
                    "stream": False,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            content = response.json()["message"]["content"]
        except httpx.HTTPError as e:
            raise TranslationError(f"Ollama request failed: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise TranslationError(f"Unexpected Ollama response: {e}") from e

        return clean_translation(content)
