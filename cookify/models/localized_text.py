"""
English/Vietnamese text pair shared by every localized field in the catalog.

English is the authoritative value: it is always returned when the requested
language has no usable translation. Vietnamese is optional and may be empty.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

ENGLISH = "en"
VIETNAMESE = "vi"
SUPPORTED_LANGUAGES = (ENGLISH, VIETNAMESE)


class LocalizedText(BaseModel):
    """An English/Vietnamese pair. Construction performs no content validation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # PascalCase aliases accept rows written by the legacy storage serializer
    english: str = Field(default="", validation_alias=AliasChoices("english", "English"))
    vietnamese: str = Field(
        default="", validation_alias=AliasChoices("vietnamese", "Vietnamese")
    )

    @field_validator("english", "vietnamese", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def create(cls, english: str, vietnamese: str = "") -> "LocalizedText":
        return cls(english=english, vietnamese=vietnamese)

    def get_localized(self, language_code: Optional[str]) -> str:
        """
        Resolve the display string for a language code.

        Vietnamese is returned only for "vi" (case-insensitive) when it is not
        blank. Every other code, including None and unknown codes, gets English.
        """
        code = (language_code or "").strip().lower()
        if code == VIETNAMESE and self.vietnamese.strip():
            return self.vietnamese
        return self.english

    def __str__(self) -> str:
        return self.english


LocalizedTextList = list[LocalizedText]


def from_english_only(english: str) -> LocalizedText:
    """Build a pair from a plain string, leaving Vietnamese empty."""
    return LocalizedText(english=english)


def to_english_string(text: Optional[LocalizedText]) -> str:
    """English value of a pair, or "" when there is no pair."""
    return text.english if text is not None else ""
