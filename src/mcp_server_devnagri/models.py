from enum import Enum
from typing import Dict, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from mcp_server_devnagri.errors import ValidationError

MIN_LANGUAGE_CODE_LENGTH = 2
# Long enough for every supported code, e.g. "mni-Mtei"
MAX_LANGUAGE_CODE_LENGTH = 8


class TranslationType(str, Enum):
    """
    Type of translation requested by the caller.
    """

    LITERAL = "literal"
    BASE = "base"


class TranslationRequest(BaseModel):
    """
    A single translation call, validated before anything is sent upstream.
    """

    model_config = ConfigDict(frozen=True)

    source_text: str = Field(min_length=1)
    source_language: str = Field(
        min_length=MIN_LANGUAGE_CODE_LENGTH, max_length=MAX_LANGUAGE_CODE_LENGTH
    )
    target_language: str = Field(
        min_length=MIN_LANGUAGE_CODE_LENGTH, max_length=MAX_LANGUAGE_CODE_LENGTH
    )
    translation_type: TranslationType = TranslationType.LITERAL

    @classmethod
    def create(
        cls,
        source_text: str,
        source_language: str,
        target_language: str,
        translation_type: Optional[Union[str, TranslationType]] = None,
    ) -> "TranslationRequest":
        """
        Build a request, turning pydantic errors into our ValidationError.
        """
        fields: Dict[str, Any] = {
            "source_text": source_text,
            "source_language": source_language,
            "target_language": target_language,
        }
        if translation_type is not None:
            fields["translation_type"] = translation_type
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ValidationError(f"Invalid translation request: {problems}") from e


class TranslationResult(BaseModel):
    translated_text: str
    source_language: str
    target_language: str
    translation_type: TranslationType


class LanguageDetectionResult(BaseModel):
    detected_language: str
    confidence_score: float = Field(ge=0.0, le=1.0)
    supported: bool


class SupportedLanguage(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    native_name: str
    code: str
