"""
MCP server exposing Devnagri translation, language detection and the
supported-language listing as tools.
"""
import json
import logging
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field

from mcp_server_devnagri import __version__
from mcp_server_devnagri.errors import DevnagriError
from mcp_server_devnagri.models import (
    MAX_LANGUAGE_CODE_LENGTH,
    MIN_LANGUAGE_CODE_LENGTH,
    TranslationRequest,
    TranslationType,
)
from mcp_server_devnagri.settings import ToolSettings
from mcp_server_devnagri.tools.multilingual import (
    DevnagriTranslator,
    detect_language,
    list_supported_languages,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "Devnagri MCP - Translation Service"

LanguageCode = Annotated[
    str,
    Field(
        min_length=MIN_LANGUAGE_CODE_LENGTH,
        max_length=MAX_LANGUAGE_CODE_LENGTH,
    ),
]


def to_text(payload: Any) -> str:
    """Serialize a tool result as pretty-printed JSON, keeping non-ASCII text."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    elif isinstance(payload, list):
        payload = [
            item.model_dump(mode="json") if isinstance(item, BaseModel) else item
            for item in payload
        ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def create_mcp_server(
    translator: DevnagriTranslator, tool_settings: Optional[ToolSettings] = None
) -> FastMCP:
    """
    Build the FastMCP server and register the translation tools.

    Args:
        translator: Client used by the translate tool
        tool_settings: Tool descriptions, read from the environment if omitted

    Returns:
        A FastMCP instance ready to run on any transport
    """
    tool_settings = tool_settings or ToolSettings()

    mcp = FastMCP(SERVER_NAME, instructions=tool_settings.server_instructions)

    @mcp.tool(
        name="translate",
        description=tool_settings.tool_translate_description,
        structured_output=False,
    )
    async def translate(
        source_text: Annotated[
            str, Field(min_length=1, description="The text to be translated")
        ],
        source_language: Annotated[
            LanguageCode, Field(description='The source language code (e.g., "en")')
        ],
        target_language: Annotated[
            LanguageCode, Field(description='The target language code (e.g., "hi")')
        ],
        translation_type: Annotated[
            TranslationType, Field(description="Type of translation requested")
        ] = TranslationType.LITERAL,
    ) -> str:
        logger.info(f"Translating from {source_language} to {target_language}")
        request = TranslationRequest.create(
            source_text, source_language, target_language, translation_type
        )
        try:
            result = await translator.translate_request(request)
        except DevnagriError as e:
            logger.error(f"Translation error: {e}")
            raise
        return to_text(result)

    @mcp.tool(
        name="detect_language",
        description=tool_settings.tool_detect_language_description,
        structured_output=False,
    )
    async def detect_language_tool(
        text: Annotated[str, Field(description="The text for language detection")],
    ) -> str:
        logger.info("Detecting language for text")
        return to_text(detect_language(text))

    @mcp.tool(
        name="list_supported_languages",
        description=tool_settings.tool_list_languages_description,
        structured_output=False,
    )
    async def list_supported_languages_tool() -> str:
        logger.info("Listing supported languages")
        return to_text(list_supported_languages())

    logger.debug(f"Created {SERVER_NAME} {__version__} using {translator.api_url}")
    return mcp
