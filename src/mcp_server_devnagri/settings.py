from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mcp_server_devnagri.tools.multilingual.translate_text import DEFAULT_API_URL

# Default tool descriptions
DEFAULT_TOOL_TRANSLATE_DESCRIPTION = (
    "Translate text from one language to another using the Devnagri API. "
    "Use list_supported_languages to find valid language codes."
)
DEFAULT_TOOL_DETECT_LANGUAGE_DESCRIPTION = (
    "Detect the language of a text from the script its characters are written in. "
    "Returns the language code, a confidence score between 0 and 1 and whether "
    "the language can be translated."
)
DEFAULT_TOOL_LIST_LANGUAGES_DESCRIPTION = (
    "List the languages supported for translation with their native names and codes."
)
DEFAULT_SERVER_INSTRUCTIONS = (
    "Translation services with a focus on Indic languages. Detect the language of "
    "a text, list supported languages and translate between them."
)


class ToolSettings(BaseSettings):
    """
    Configuration for all the tools.
    """

    tool_translate_description: str = Field(
        default=DEFAULT_TOOL_TRANSLATE_DESCRIPTION,
        validation_alias="TOOL_TRANSLATE_DESCRIPTION",
    )
    tool_detect_language_description: str = Field(
        default=DEFAULT_TOOL_DETECT_LANGUAGE_DESCRIPTION,
        validation_alias="TOOL_DETECT_LANGUAGE_DESCRIPTION",
    )
    tool_list_languages_description: str = Field(
        default=DEFAULT_TOOL_LIST_LANGUAGES_DESCRIPTION,
        validation_alias="TOOL_LIST_LANGUAGES_DESCRIPTION",
    )
    server_instructions: str = Field(
        default=DEFAULT_SERVER_INSTRUCTIONS,
        validation_alias="SERVER_INSTRUCTIONS",
    )


class DevnagriSettings(BaseSettings):
    """
    Configuration for the Devnagri translation API.

    Values passed to the constructor win over environment variables, which
    win over a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: Optional[str] = Field(default=None, validation_alias="DEVNAGRI_API_KEY")
    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="DEVNAGRI_API_URL")
    request_timeout: Optional[float] = Field(
        default=None, validation_alias="DEVNAGRI_REQUEST_TIMEOUT"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
