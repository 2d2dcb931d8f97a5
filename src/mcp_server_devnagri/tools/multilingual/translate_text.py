"""Translation tool backed by the Devnagri machine translation API."""
from typing import Any, Dict, Optional
import logging

import httpx

from mcp_server_devnagri.errors import UpstreamError
from mcp_server_devnagri.models import TranslationRequest, TranslationResult

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.devnagri.com/machine-translation/v2/translate"


class DevnagriTranslator:
    """
    Client for the Devnagri translation endpoint.

    Holds only read-only configuration, so one instance can serve concurrent
    tool calls. Every call makes exactly one request and never retries.

    Args:
        api_key: Devnagri API key sent with each request
        api_url: Translation endpoint
        timeout: Request timeout in seconds, None to wait indefinitely
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("A Devnagri API key is required")
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @property
    def api_url(self) -> str:
        return self._api_url

    async def translate(
        self, source_text: str, source_language: str, target_language: str
    ) -> str:
        """
        Translate text from source language to target language.

        Raises:
            UpstreamError: if the API fails, is unreachable or answers with
                something other than a translation
        """
        payload = {
            "key": self._api_key,
            "sentence": source_text,
            "src_lang": source_language,
            "dest_lang": target_language,
        }
        headers = {"Content-Type": "application/x-www-form-urlencoded"}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._api_url, data=payload, headers=headers)
        except httpx.RequestError as e:
            error_msg = f"Failed to translate text: request error: {str(e)}"
            logger.error(error_msg)
            raise UpstreamError(error_msg) from e

        body = _parse_body(response)

        if response.status_code != 200:
            reason = body.get("msg") if body else None
            error_msg = (
                f"Failed to translate text: HTTP {response.status_code} "
                f"{response.reason_phrase}: {reason or 'Unknown error'}"
            )
            logger.error(error_msg)
            raise UpstreamError(error_msg, status_code=response.status_code)

        translated_text = body.get("translated_text") if body else None
        if not isinstance(translated_text, str):
            error_msg = "Failed to translate text: response has no translated_text field"
            logger.error(error_msg)
            raise UpstreamError(error_msg, status_code=response.status_code)

        return translated_text

    async def translate_request(self, request: TranslationRequest) -> TranslationResult:
        """Translate a validated request and echo its parameters back."""
        translated_text = await self.translate(
            request.source_text, request.source_language, request.target_language
        )
        return TranslationResult(
            translated_text=translated_text,
            source_language=request.source_language,
            target_language=request.target_language,
            translation_type=request.translation_type,
        )


def _parse_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    # Error responses are not guaranteed to be JSON
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
