"""Unit tests for translation adapters."""

import json
import subprocess
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from scanscribe.adapters.translation import claude_cli
from scanscribe.adapters.translation.claude_api import ClaudeAPIAdapter
from scanscribe.adapters.translation.claude_cli import ClaudeCLIAdapter
from scanscribe.adapters.translation.languages import is_supported_pair, language_name
from scanscribe.adapters.translation.ollama import OllamaAdapter
from scanscribe.adapters.translation.prompts import system_prompt
from scanscribe.adapters.translation.validation import (
    DOC_BEGIN,
    DOC_END,
    clean_translation,
    wrap_document,
)
from scanscribe.domain.errors import TranslationError
from scanscribe.domain.models import TranslationAvailability

OLLAMA_URL = "http://localhost:11434"


def ollama_response(method: str, path: str, status: int = 200, **kwargs: Any) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request(method, f"{OLLAMA_URL}{path}"), **kwargs)


class TestLanguages:
    """Tests for language names and pairs."""

    def test_names_for_both_code_styles(self) -> None:
        assert language_name("de") == "German"
        assert language_name("deu") == "German"
        assert language_name("xx") is None

    def test_supported_pairs(self) -> None:
        assert is_supported_pair("deu", "en")
        assert not is_supported_pair("deu", "de")
        assert not is_supported_pair("deu", "xx")


class TestValidation:
    """Tests for delimiter handling."""

    def test_wrap_document(self) -> None:
        assert wrap_document("Text") == f"{DOC_BEGIN}\nText\n{DOC_END}"

    def test_clean_strips_echoed_delimiters(self) -> None:
        assert clean_translation(f"{DOC_BEGIN}\nHallo\nWelt\n{DOC_END}\n") == "Hallo\nWelt"

    def test_clean_keeps_plain_text(self) -> None:
        assert clean_translation("  Hallo  ") == "Hallo"

    def test_prompt_names_languages(self) -> None:
        prompt = system_prompt("German", "English")
        assert "from German to English" in prompt
        assert DOC_BEGIN in prompt


class TestOllamaAdapter:
    """Tests for OllamaAdapter with httpx patched."""

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(ValueError):
            OllamaAdapter(base_url="ftp://example.com")

    def test_unknown_pair_is_unsupported(self) -> None:
        assert OllamaAdapter().availability("deu", "xx") == TranslationAvailability.UNSUPPORTED

    def test_installed_model(self, monkeypatch) -> None:
        monkeypatch.setattr(
            httpx,
            "get",
            lambda url, **kw: ollama_response(
                "GET", "/api/tags", json={"models": [{"name": "gemma3:4b"}]}
            ),
        )
        assert OllamaAdapter().availability("deu", "eng") == TranslationAvailability.INSTALLED

    def test_missing_model_needs_install(self, monkeypatch) -> None:
        monkeypatch.setattr(
            httpx,
            "get",
            lambda url, **kw: ollama_response("GET", "/api/tags", json={"models": []}),
        )
        assert OllamaAdapter().availability("deu", "eng") == TranslationAvailability.SUPPORTED

    def test_unreachable_server_needs_install(self, monkeypatch) -> None:
        def refuse(url: str, **kwargs: Any) -> httpx.Response:
            raise httpx.ConnectError("Connection refused")

        monkeypatch.setattr(httpx, "get", refuse)
        assert OllamaAdapter().availability("deu", "eng") == TranslationAvailability.SUPPORTED

    def test_translate(self, monkeypatch) -> None:
        requests: list[dict[str, Any]] = []

        def post(url: str, json: dict[str, Any], **kwargs: Any) -> httpx.Response:
            requests.append(json)
            return ollama_response(
                "POST", "/api/chat", json={"message": {"content": "Hello\nWorld\n"}}
            )

        monkeypatch.setattr(httpx, "post", post)

        assert OllamaAdapter().translate("Hallo\nWelt", "deu", "eng") == "Hello\nWorld"
        assert requests[0]["stream"] is False
        assert "from German to English" in requests[0]["messages"][0]["content"]
        assert requests[0]["messages"][1]["content"] == wrap_document("Hallo\nWelt")

    def test_translate_http_error(self, monkeypatch) -> None:
        monkeypatch.setattr(
            httpx, "post", lambda url, **kw: ollama_response("POST", "/api/chat", 500)
        )
        with pytest.raises(TranslationError, match="Ollama request failed"):
            OllamaAdapter().translate("Hallo", "deu", "eng")

    def test_translate_unexpected_response(self, monkeypatch) -> None:
        monkeypatch.setattr(
            httpx,
            "post",
            lambda url, **kw: ollama_response("POST", "/api/chat", json={"done": True}),
        )
        with pytest.raises(TranslationError, match="Unexpected Ollama response"):
            OllamaAdapter().translate("Hallo", "deu", "eng")


class TestClaudeAPIAdapter:
    """Tests for ClaudeAPIAdapter with a stub client."""

    def test_needs_api_key(self, monkeypatch) -> None:
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        assert (
            ClaudeAPIAdapter().availability("deu", "eng")
            == TranslationAvailability.SUPPORTED
        )

    def test_installed_with_api_key(self, monkeypatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        assert (
            ClaudeAPIAdapter().availability("deu", "eng")
            == TranslationAvailability.INSTALLED
        )

    def test_translate(self) -> None:
        adapter = ClaudeAPIAdapter(model="claude-test")
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(text=f"{DOC_BEGIN}\nHello\n{DOC_END}")]
        )
        adapter._client = client

        assert adapter.translate("Hallo", "de", "en") == "Hello"
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert "from German to English" in kwargs["system"]

    def test_api_error(self) -> None:
        adapter = ClaudeAPIAdapter()
        client = MagicMock()
        client.messages.create.side_effect = anthropic.APIConnectionError(
            request=httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        )
        adapter._client = client

        with pytest.raises(TranslationError, match="Claude API request failed"):
            adapter.translate("Hallo", "de", "en")

    def test_empty_response(self) -> None:
        adapter = ClaudeAPIAdapter()
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(content=[])
        adapter._client = client

        with pytest.raises(TranslationError, match="empty response"):
            adapter.translate("Hallo", "de", "en")


class TestClaudeCLIAdapter:
    """Tests for ClaudeCLIAdapter with subprocess patched."""

    def test_missing_binary_needs_install(self, monkeypatch) -> None:
        monkeypatch.setattr(claude_cli.shutil, "which", lambda name: None)
        assert (
            ClaudeCLIAdapter().availability("deu", "eng")
            == TranslationAvailability.SUPPORTED
        )

    def test_binary_on_path_is_installed(self, monkeypatch) -> None:
        monkeypatch.setattr(claude_cli.shutil, "which", lambda name: "/usr/bin/claude")
        assert (
            ClaudeCLIAdapter().availability("deu", "eng")
            == TranslationAvailability.INSTALLED
        )

    def test_translate(self, monkeypatch) -> None:
        calls: list[dict[str, Any]] = []

        def run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
            calls.append({"args": args, **kwargs})
            return subprocess.CompletedProcess(
                args, 0, stdout=json.dumps({"result": "Hello", "is_error": False})
            )

        monkeypatch.setattr(claude_cli.subprocess, "run", run)

        assert ClaudeCLIAdapter(timeout=30).translate("Hallo", "deu", "eng") == "Hello"
        assert calls[0]["args"] == ["claude", "-p", "--output-format", "json"]
        assert calls[0]["timeout"] == 30
        assert wrap_document("Hallo") in calls[0]["input"]

    def test_reported_error(self, monkeypatch) -> None:
        monkeypatch.setattr(
            claude_cli.subprocess,
            "run",
            lambda args, **kw: subprocess.CompletedProcess(
                args, 0, stdout=json.dumps({"result": "rate limited", "is_error": True})
            ),
        )
        with pytest.raises(TranslationError, match="rate limited"):
            ClaudeCLIAdapter().translate("Hallo", "deu", "eng")

    def test_timeout(self, monkeypatch) -> None:
        def run(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        monkeypatch.setattr(claude_cli.subprocess, "run", run)
        with pytest.raises(TranslationError):
            ClaudeCLIAdapter(timeout=1).translate("Hallo", "deu", "eng")
