"""Input records accepted by the rating engine.

Rows come straight out of Firestore/Supabase, so the validators here are
lenient about shapes (JSON strings, bare strings instead of objects, "$$"
price ranges) and strict about anything the formulas depend on.
"""

import json
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class NamedItem(BaseModel):
    """A feature, cuisine or amenity entry. Only the name is used for matching."""
    name: str = ""

    model_config = {"extra": "ignore"}


def _coerce_named_list(v: Any) -> List[Any]:
    if v is None:
        return []
    if isinstance(v, str):
        # Handle JSON string from DB
        try:
            v = json.loads(v)
        except json.JSONDecodeError:
            return [{"name": v}]
    if isinstance(v, dict):
        v = [v]
    items = []
    for item in v:
        if isinstance(item, str):
            items.append({"name": item})
        elif isinstance(item, dict):
            items.append({"name": item.get("name") or ""})
        elif isinstance(item, NamedItem):
            items.append(item)
    return items


def _coerce_price_level(v: Any) -> Optional[int]:
    # 0 / "" / None mean "not set", so the default price level applies
    if not v:
        return None
    if isinstance(v, str):
        stripped = v.strip()
        if not stripped:
            return None
        if set(stripped) == {"$"}:
            return len(stripped)
        return int(stripped) or None
    return int(v) or None


class TripAdvisorRating(BaseModel):
    """Pre-fetched TripAdvisor listing rating (native 0-5 scale)."""
    rating: float = Field(..., ge=0, le=5)
    count: int = Field(0, ge=0)


class CategoryRatingInput(BaseModel):
    """Rating fields shared by the category entity records."""
    id: Optional[str] = None
    name: str = ""

    google_rating: Optional[float] = Field(None, ge=0, le=5)
    google_review_count: int = Field(0, ge=0)
    review_sentiment: Optional[str] = None

    description: Optional[str] = None
    short_description: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if v is not None else None

    @field_validator("google_review_count", mode="before")
    @classmethod
    def coerce_count(cls, v):
        return int(v) if v is not None else 0


class RestaurantRatingInput(BaseModel):
    """Restaurant record as stored by the admin panel."""
    id: Optional[str] = None
    name: str = ""
    slug: Optional[str] = None
    description: Optional[str] = None
    price_level: Optional[int] = Field(None, ge=1, le=4)

    # Google rating (0-5) and review count
    overall_rating: Optional[float] = Field(None, ge=0, le=5)
    total_reviews_aggregated: int = Field(0, ge=0)

    features: List[NamedItem] = Field(default_factory=list)
    cuisines: List[NamedItem] = Field(default_factory=list)
    reviews: List[Any] = Field(default_factory=list)
    area: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if v is not None else None

    @field_validator("total_reviews_aggregated", mode="before")
    @classmethod
    def coerce_count(cls, v):
        return int(v) if v is not None else 0

    @field_validator("price_level", mode="before")
    @classmethod
    def coerce_price_level(cls, v):
        return _coerce_price_level(v)

    @field_validator("features", "cuisines", mode="before")
    @classmethod
    def coerce_named(cls, v):
        return _coerce_named_list(v)

    @field_validator("reviews", mode="before")
    @classmethod
    def coerce_reviews(cls, v):
        return v or []


class HotelRatingInput(CategoryRatingInput):
    tripadvisor_rating: Optional[float] = Field(None, ge=0, le=5)
    tripadvisor_review_count: int = Field(0, ge=0)

    @field_validator("tripadvisor_review_count", mode="before")
    @classmethod
    def coerce_ta_count(cls, v):
        return int(v) if v is not None else 0


class AttractionRatingInput(CategoryRatingInput):
    tripadvisor_rating: Optional[float] = Field(None, ge=0, le=5)
    tripadvisor_review_count: int = Field(0, ge=0)
    is_free: Optional[bool] = None
    admission_fee: Optional[float] = None
    attraction_type: Optional[str] = None

    @field_validator("tripadvisor_review_count", mode="before")
    @classmethod
    def coerce_ta_count(cls, v):
        return int(v) if v is not None else 0


class MallRatingInput(CategoryRatingInput):
    total_stores: Optional[int] = None


class SchoolRatingInput(CategoryRatingInput):
    school_type: Optional[str] = None
    curriculum: List[str] = Field(default_factory=list)

    @field_validator("curriculum", mode="before")
    @classmethod
    def coerce_curriculum(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class FitnessRatingInput(CategoryRatingInput):
    gender_policy: Optional[str] = None
    open_24_hours: Optional[bool] = None
