"""Translation adapters."""

from ...config import TranslationConfig, TranslationProvider
from ...ports.translation import TranslationPort
from .claude_api import ClaudeAPIAdapter
from .claude_cli import ClaudeCLIAdapter
from .ollama import OllamaAdapter

__all__ = [
    "ClaudeAPIAdapter",
    "ClaudeCLIAdapter",
    "OllamaAdapter",
    "create_translation_adapter",
]


def create_translation_adapter(config: TranslationConfig) -> TranslationPort:
    """Create translation adapter based on configuration."""
    timeout = config.timeout or None
    if config.provider == TranslationProvider.OLLAMA:
        return OllamaAdapter(model=config.model, base_url=config.ollama_url, timeout=timeout)
    elif config.provider == TranslationProvider.CLAUDE_API:
        return ClaudeAPIAdapter(model=config.claude_model, timeout=timeout)
    elif config.provider == TranslationProvider.CLAUDE_CLI:
        return ClaudeCLIAdapter(timeout=timeout)
    else:
        raise ValueError(f"Unknown translation provider: {config.provider}")
