"""Pytest fixtures for the Devnagri MCP server tests."""

from typing import Any, Callable, List, Optional

import httpx
import pytest

from mcp_server_devnagri.settings import ToolSettings
from mcp_server_devnagri.tools.multilingual import DevnagriTranslator

TEST_API_KEY = "test-api-key"
TEST_API_URL = "https://devnagri.test/machine-translation/v2/translate"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real credentials and .env files out of the tests."""
    for name in (
        "DEVNAGRI_API_KEY",
        "DEVNAGRI_API_URL",
        "DEVNAGRI_REQUEST_TIMEOUT",
        "LOG_LEVEL",
        "TOOL_TRANSLATE_DESCRIPTION",
        "TOOL_DETECT_LANGUAGE_DESCRIPTION",
        "TOOL_LIST_LANGUAGES_DESCRIPTION",
        "SERVER_INSTRUCTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the stub upstream, in order."""
    return []


@pytest.fixture
def make_translator(sent_requests) -> Callable[..., DevnagriTranslator]:
    """Build a translator whose upstream is an in-memory stub.

    ``handler`` overrides the stub entirely; otherwise it answers every
    request with ``status_code`` and a JSON ``body`` (or raw ``content``).
    """

    def factory(
        status_code: int = 200,
        body: Any = None,
        content: Optional[bytes] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ) -> DevnagriTranslator:
        def respond(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if handler is not None:
                return handler(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body)

        return DevnagriTranslator(
            api_key=TEST_API_KEY,
            api_url=TEST_API_URL,
            transport=httpx.MockTransport(respond),
        )

    return factory


@pytest.fixture
def hindi_translator(make_translator) -> DevnagriTranslator:
    return make_translator(
        body={"translated_text": "नमस्ते दुनिया", "src_lang": "en", "dest_lang": "hi"}
    )


@pytest.fixture
def tool_settings() -> ToolSettings:
    return ToolSettings()
