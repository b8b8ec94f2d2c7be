"""
Pydantic models for character input.

These validate what users type into the add / edit forms before
anything reaches the database.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


FIELD_LABELS = {
    "chinese": "Chinese character",
    "pinyin": "Pinyin",
    "english": "English translation",
    "category": "Category",
}


def _required_text(value: str, field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{FIELD_LABELS[field]} is required")
    return value


class CharacterInput(BaseModel):
    """User-editable fields of a new or edited character."""
    model_config = ConfigDict(frozen=True)

    chinese: str = Field(..., description="Chinese character(s)", examples=["你好"])
    pinyin: str = Field(..., description="Romanized pronunciation", examples=["nǐ hǎo"])
    english: str = Field(..., description="English translation", examples=["hello"])
    category: str = Field(..., description="Grouping label", examples=["Greetings"])

    @field_validator("chinese", "pinyin", "english", "category", mode="before")
    @classmethod
    def _strip_required(cls, value, info):
        return _required_text(value, info.field_name)


class CharacterUpdate(BaseModel):
    """Sparse update; omitted fields are left unchanged."""
    model_config = ConfigDict(frozen=True)

    chinese: Optional[str] = None
    pinyin: Optional[str] = None
    english: Optional[str] = None
    category: Optional[str] = None

    @field_validator("chinese", "pinyin", "english", "category", mode="before")
    @classmethod
    def _strip_if_given(cls, value, info):
        if value is None:
            return None
        return _required_text(value, info.field_name)


def validation_messages(error) -> dict[str, str]:
    """
    Flatten a pydantic ValidationError into field -> message for form display.
    """
    messages: dict[str, str] = {}
    for item in error.errors():
        field = str(item["loc"][0]) if item.get("loc") else "__root__"
        message = item.get("msg", "Invalid value")
        # pydantic prefixes ValueError messages with "Value error, "
        messages.setdefault(field, message.removeprefix("Value error, "))
    return messages
