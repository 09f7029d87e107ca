"""Translation adapter using Claude CLI."""

import json
import logging
import shutil
import subprocess

from ...domain.errors import TranslationError
from ...domain.models import TranslationAvailability
from ...ports.translation import TranslationPort
from .languages import is_supported_pair, language_name
from .prompts import system_prompt
from .validation import clean_translation, wrap_document

logger = logging.getLogger(__name__)

CLAUDE_BINARY = "claude"


class ClaudeCLIAdapter(TranslationPort):
    """Translation implementation using Claude CLI (uses subscription)."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def availability(self, source: str, target: str) -> TranslationAvailability:
        if not is_supported_pair(source, target):
            return TranslationAvailability.UNSUPPORTED
        if shutil.which(CLAUDE_BINARY) is None:
            logger.warning(f"{CLAUDE_BINARY} not found on PATH")
            return TranslationAvailability.SUPPORTED
        return TranslationAvailability.INSTALLED

    def translate(self, text: str, source: str, target: str) -> str:
        logger.debug(f"Translating {len(text)} characters with Claude CLI")

        prompt = "\n\n".join(
            [
                system_prompt(
                    language_name(source) or source, language_name(target) or target
                ),
                wrap_document(text),
            ]
        )

        try:
            result = subprocess.run(
                [CLAUDE_BINARY, "-p", "--output-format", "json"],
                input=prompt,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
            data = json.loads(result.stdout)
        except subprocess.CalledProcessError as e:
            raise TranslationError(f"Claude CLI failed: {e.stderr or e}") from e
        except (subprocess.TimeoutExpired, OSError, json.JSONDecodeError) as e:
            raise TranslationError(f"Claude CLI failed: {e}") from e

        if data.get("is_error"):
            raise TranslationError(f"Claude CLI failed: {data.get('result')}")
        return clean_translation(data.get("result", ""))
