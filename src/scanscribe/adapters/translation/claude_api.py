"""Translation adapter using Claude API."""

import logging
import os

import anthropic

from ...domain.errors import TranslationError
from ...domain.models import TranslationAvailability
from ...ports.translation import TranslationPort
from .languages import is_supported_pair, language_name
from .prompts import system_prompt
from .validation import clean_translation, wrap_document

logger = logging.getLogger(__name__)

API_KEY_VARIABLE = "ANTHROPIC_API_KEY"


class ClaudeAPIAdapter(TranslationPort):
    """Translation implementation using Claude API (pay-as-you-go)."""

    def __init__(
        self, model: str = "claude-sonnet-4-20250514", timeout: float | None = None
    ) -> None:
        self.model = model
        self.timeout = timeout
        self._client: anthropic.Anthropic | None = None

    @property
    def client(self) -> anthropic.Anthropic:
        if self._client is None:
            self._client = anthropic.Anthropic(timeout=self.timeout)
        return self._client

    def availability(self, source: str, target: str) -> TranslationAvailability:
        if not is_supported_pair(source, target):
            return TranslationAvailability.UNSUPPORTED
        if not os.environ.get(API_KEY_VARIABLE):
            logger.warning(f"{API_KEY_VARIABLE} is not set")
            return TranslationAvailability.SUPPORTED
        return TranslationAvailability.INSTALLED

    def translate(self, text: str, source: str, target: str) -> str:
        logger.debug(f"Translating {len(text)} characters with Claude API")

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=4096,
                system=system_prompt(
                    language_name(source) or source, language_name(target) or target
                ),
                messages=[{"role": "user", "content": wrap_document(text)}],
            )
        except anthropic.APIError as e:
            raise TranslationError(f"Claude API request failed: {e}") from e

        if not response.content:
            raise TranslationError("Claude API returned an empty response")
        return clean_translation(response.content[0].text)
