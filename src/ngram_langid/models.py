from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field, NonNegativeInt, field_validator


class LanguageProfile(BaseModel):
    """Frozen n-gram frequency table for one language.

    frequencies is stored as a read-only mapping view.
    """

    code: str = Field(min_length=1)
    frequencies: dict[str, NonNegativeInt]
    # Total occurrences of all grams of length 1, 2 and 3
    word_count: tuple[NonNegativeInt, NonNegativeInt, NonNegativeInt]

    model_config = {"frozen": True}

    @field_validator("frequencies")
    @classmethod
    def _read_only_grams(cls, value: dict[str, int]) -> Mapping[str, int]:
        if "" in value:
            raise ValueError("empty n-gram in frequency table")
        return MappingProxyType(value)


class DetectedLanguage(BaseModel):
    language: str
    probability: float = Field(ge=0.0)

    model_config = {"frozen": True}
