"""
Multilingual tools for the Devnagri MCP server.

This package contains the translation client, the script-based language
detector and the table of supported languages.
"""

from .detect_language import SCRIPT_RULES, ScriptRule, detect_language, script_counts
from .supported_languages import (
    SUPPORTED_LANGUAGES,
    is_supported,
    list_supported_languages,
    supported_language_codes,
)
from .translate_text import DEFAULT_API_URL, DevnagriTranslator

__all__ = [
    "DEFAULT_API_URL",
    "DevnagriTranslator",
    "SCRIPT_RULES",
    "SUPPORTED_LANGUAGES",
    "ScriptRule",
    "detect_language",
    "is_supported",
    "list_supported_languages",
    "script_counts",
    "supported_language_codes",
]
