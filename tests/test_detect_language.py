"""Tests for the script-based language detector."""

import pytest

from mcp_server_devnagri.models import LanguageDetectionResult
from mcp_server_devnagri.tools.multilingual import (
    SCRIPT_RULES,
    detect_language,
    script_counts,
)


class TestDetectLanguage:
    """Detection of single-script text."""

    def test_detects_english(self):
        result = detect_language("Hello world")

        assert result.detected_language == "en"
        assert result.supported is True
        assert result.confidence_score > 0

    def test_detects_hindi(self):
        result = detect_language("नमस्ते दुनिया")

        assert result.detected_language == "hi"
        assert result.supported is True
        assert result.confidence_score > 0

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("வணக்கம்", "ta"),
            ("નમસ્તે", "gu"),
            ("ನಮಸ್ಕಾರ", "kn"),
            ("ਸਤਿ ਸ੍ਰੀ ਅਕਾਲ", "pa"),
            ("নমস্কার", "bn"),
            ("مرحبا", "ar"),
            ("Привет", "ru"),
            ("שלום", "he"),
            ("你好", "zh-CN"),
            ("こんにちは", "ja"),
            ("カタカナ", "ja"),
            ("안녕하세요", "ko"),
        ],
    )
    def test_detects_other_scripts(self, text, expected):
        assert detect_language(text).detected_language == expected

    def test_confidence_is_ratio_of_total_length(self):
        # 10 letters out of 11 characters, the space counts against it
        result = detect_language("Hello world")

        assert result.confidence_score == pytest.approx(10 / 11)

    def test_confidence_is_one_for_pure_script(self):
        assert detect_language("Hello").confidence_score == pytest.approx(1.0)

    def test_detected_language_missing_from_table_is_unsupported(self):
        result = detect_language("Привет мир")

        assert result.detected_language == "ru"
        assert result.supported is False

    def test_tibetan_is_unsupported(self):
        result = detect_language("བཀྲ་ཤིས་བདེ་ལེགས")

        assert result.detected_language == "bo"
        assert result.supported is False


class TestDetectLanguageEdgeCases:
    """Empty, mixed and signal-free input."""

    def test_empty_text_has_zero_confidence(self):
        result = detect_language("")

        assert isinstance(result, LanguageDetectionResult)
        assert result.confidence_score == 0
        assert result.detected_language == SCRIPT_RULES[0].code

    def test_text_without_known_script_falls_back_to_first_rule(self):
        result = detect_language("1234 !?")

        assert result.detected_language == "hi"
        assert result.confidence_score == 0
        assert result.supported is True

    def test_mixed_text_picks_a_contained_script(self):
        result = detect_language("Hello नमस्ते")

        assert result.detected_language in {"en", "hi"}
        assert result.confidence_score > 0

    def test_mixed_text_majority_wins(self):
        assert detect_language("Hi नमस्ते दुनिया").detected_language == "hi"
        assert detect_language("Hello wonderful world न").detected_language == "en"

    def test_tie_goes_to_earlier_rule(self):
        # one Latin letter and one Devanagari letter, Hindi is listed first
        assert detect_language("aक").detected_language == "hi"

    def test_never_raises_on_odd_input(self):
        result = detect_language("\n\t\x00 😀")

        assert 0.0 <= result.confidence_score <= 1.0


class TestScriptCounts:
    def test_counts_every_rule_in_table_order(self):
        counts = script_counts("Hello")

        assert [rule.code for rule, _ in counts] == [rule.code for rule in SCRIPT_RULES]
        assert dict((rule.code, count) for rule, count in counts)["en"] == 5

    def test_rules_are_counted_independently(self):
        counts = {rule.code: count for rule, count in script_counts("ab नम")}

        assert counts["en"] == 2
        assert counts["hi"] == 2

    def test_table_has_seventeen_rules_with_english_last(self):
        assert len(SCRIPT_RULES) == 17
        assert SCRIPT_RULES[-1].code == "en"
