"""Script-based language detection for the Devnagri MCP server."""
import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple
import logging

from mcp_server_devnagri.models import LanguageDetectionResult
from mcp_server_devnagri.tools.multilingual.supported_languages import is_supported

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptRule:
    """A Unicode range that hints at one language."""

    pattern: Pattern[str]
    code: str
    name: str


# Order matters only for ties: the earlier rule wins.
SCRIPT_RULES: Tuple[ScriptRule, ...] = (
    ScriptRule(re.compile("[\u0900-\u097F]"), "hi", "Hindi"),
    ScriptRule(re.compile("[\u0A80-\u0AFF]"), "gu", "Gujarati"),
    ScriptRule(re.compile("[\u0B00-\u0B7F]"), "or", "Odia"),
    ScriptRule(re.compile("[\u0B80-\u0BFF]"), "ta", "Tamil"),
    ScriptRule(re.compile("[\u0C00-\u0C7F]"), "te", "Telugu"),
    ScriptRule(re.compile("[\u0C80-\u0CFF]"), "kn", "Kannada"),
    ScriptRule(re.compile("[\u0D00-\u0D7F]"), "ml", "Malayalam"),
    ScriptRule(re.compile("[\u0A00-\u0A7F]"), "pa", "Punjabi"),
    ScriptRule(re.compile("[\u0980-\u09FF]"), "bn", "Bengali"),
    ScriptRule(re.compile("[\u0600-\u06FF]"), "ar", "Arabic"),
    ScriptRule(re.compile("[\u0F00-\u0FFF]"), "bo", "Tibetan"),
    ScriptRule(re.compile("[\u0400-\u04FF]"), "ru", "Russian"),
    ScriptRule(re.compile("[\u0590-\u05FF]"), "he", "Hebrew"),
    ScriptRule(re.compile("[\u4E00-\u9FFF]"), "zh-CN", "Chinese"),
    ScriptRule(re.compile("[\u3040-\u30FF]"), "ja", "Japanese"),
    ScriptRule(re.compile("[\uAC00-\uD7AF]"), "ko", "Korean"),
    ScriptRule(re.compile("[A-Za-z]"), "en", "English"),
)


def script_counts(text: str) -> List[Tuple[ScriptRule, int]]:
    """
    Count the characters of ``text`` matched by each script rule.

    Every rule is applied independently, so the result keeps table order.
    """
    return [(rule, len(rule.pattern.findall(text))) for rule in SCRIPT_RULES]


def detect_language(text: str) -> LanguageDetectionResult:
    """
    Guess the language of ``text`` from the script its characters belong to.

    The winner is the rule with the most matching characters; ties go to the
    rule listed first. The confidence score is the winner's match count over
    the full length of the text, so whitespace, digits and punctuation lower
    it. Text with no recognised characters still yields the first rule with
    a confidence of 0.

    Args:
        text: The text to detect language from

    Returns:
        The detected language code, its confidence and whether the
        translation API supports it
    """
    counts = script_counts(text)
    # sorted() is stable, equal counts keep table order
    best_rule, best_count = sorted(counts, key=lambda item: item[1], reverse=True)[0]

    confidence = best_count / len(text) if text else 0.0

    logger.debug(
        f"Detected {best_rule.name} ({best_rule.code}) with {best_count} "
        f"matching characters out of {len(text)}"
    )

    return LanguageDetectionResult(
        detected_language=best_rule.code,
        confidence_score=confidence,
        supported=is_supported(best_rule.code),
    )
