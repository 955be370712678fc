"""Sentiment modifier models produced by the review analyzer."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MODIFIER_MIN = -3.0
MODIFIER_MAX = 3.0


class KeywordCounts(BaseModel):
    """Keywords found per impact tier (diagnostic only)."""
    critical_negative: List[str] = Field(default_factory=list, alias="criticalNegative")
    moderate_negative: List[str] = Field(default_factory=list, alias="moderateNegative")
    minor_negative: List[str] = Field(default_factory=list, alias="minorNegative")
    positive: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_list(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(item) for item in v]


class SentimentModifiers(BaseModel):
    """Per-component adjustments derived from review text.

    Accepts the camelCase keys the LLM returns. Out-of-range values are
    clamped to [-3, 3] and missing or null values count as 0.
    """
    food_quality_modifier: float = Field(0.0, alias="foodQualityModifier")
    service_modifier: float = Field(0.0, alias="serviceModifier")
    ambience_modifier: float = Field(0.0, alias="ambienceModifier")
    value_modifier: float = Field(0.0, alias="valueModifier")
    accessibility_modifier: float = Field(0.0, alias="accessibilityModifier")
    keyword_counts: Optional[KeywordCounts] = Field(None, alias="keywordCounts")

    # False when the modifiers are the neutral fallback (no reviews / failure)
    analyzed: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator(
        "food_quality_modifier",
        "service_modifier",
        "ambience_modifier",
        "value_modifier",
        "accessibility_modifier",
        mode="before",
    )
    @classmethod
    def clamp_modifier(cls, v):
        try:
            value = float(v) if v is not None else 0.0
        except (TypeError, ValueError):
            return 0.0
        if value != value:  # NaN
            return 0.0
        return max(MODIFIER_MIN, min(MODIFIER_MAX, value))

    @classmethod
    def neutral(cls) -> "SentimentModifiers":
        return cls(keyword_counts=KeywordCounts(), analyzed=False)
