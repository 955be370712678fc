"""Result models for the BOK score calculation."""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .enums import EntityType, ReviewSourceType, ScoreLabel


class RatingSource(BaseModel):
    """One provider's contribution to a restaurant score."""
    rating: float = Field(..., description="Raw rating on the provider's native scale")
    count: int = Field(..., ge=0, description="Review volume")
    normalized: float = Field(..., ge=0, le=10, description="Rating on the 0-10 scale")


class RatingSources(BaseModel):
    google: Optional[RatingSource] = None
    tripadvisor: Optional[RatingSource] = None

    def present(self) -> List[RatingSource]:
        return [source for source in (self.google, self.tripadvisor) if source is not None]


class ReviewSource(BaseModel):
    """Normalised review source used by the category variants."""
    source: ReviewSourceType
    rating: float = Field(..., description="Rating already converted to 0-10")
    review_count: int = Field(..., ge=0)
    sentiment_score: Optional[float] = None
    last_updated: datetime


class ComponentScores(BaseModel):
    """Restaurant component scores before weighting (0-10 each)."""
    food_quality: float
    service: float
    ambience: float
    value: float
    accessibility: float


class RestaurantRatings(BaseModel):
    """Restaurant rating artifact persisted on the restaurant document."""
    overall_score: float = Field(..., ge=0, le=10)
    score_label: ScoreLabel

    food_quality_score: float = Field(..., ge=0, le=10)
    service_score: float = Field(..., ge=0, le=10)
    ambience_score: float = Field(..., ge=0, le=10)
    value_score: float = Field(..., ge=0, le=10)
    accessibility_score: float = Field(..., ge=0, le=10)

    rating_sources: RatingSources
    total_review_count: int = Field(0, ge=0)
    sentiment_analyzed: bool = False
    last_rating_update: str = Field(..., description="ISO-8601 timestamp")
    algorithm_version: str


class CategoryBreakdown(BaseModel):
    calculated_at: str
    algorithm_version: str

    def component_scores(self) -> Dict[str, float]:
        return self.model_dump(exclude={"calculated_at", "algorithm_version"})


class HotelRatingBreakdown(CategoryBreakdown):
    room_quality: float = Field(..., ge=0, le=10)
    service: float = Field(..., ge=0, le=10)
    cleanliness: float = Field(..., ge=0, le=10)
    location: float = Field(..., ge=0, le=10)
    value_for_money: float = Field(..., ge=0, le=10)
    amenities: float = Field(..., ge=0, le=10)


class AttractionRatingBreakdown(CategoryBreakdown):
    experience: float = Field(..., ge=0, le=10)
    cultural_value: float = Field(..., ge=0, le=10)
    accessibility: float = Field(..., ge=0, le=10)
    facilities: float = Field(..., ge=0, le=10)
    value_for_money: float = Field(..., ge=0, le=10)
    uniqueness: float = Field(..., ge=0, le=10)


class MallRatingBreakdown(CategoryBreakdown):
    variety: float = Field(..., ge=0, le=10)
    amenities: float = Field(..., ge=0, le=10)
    accessibility: float = Field(..., ge=0, le=10)
    cleanliness: float = Field(..., ge=0, le=10)
    atmosphere: float = Field(..., ge=0, le=10)
    value: float = Field(..., ge=0, le=10)


class SchoolRatingBreakdown(CategoryBreakdown):
    academic_excellence: float = Field(..., ge=0, le=10)
    facilities_quality: float = Field(..., ge=0, le=10)
    teacher_quality: float = Field(..., ge=0, le=10)
    programs_activities: float = Field(..., ge=0, le=10)
    environment_safety: float = Field(..., ge=0, le=10)
    value_for_money: float = Field(..., ge=0, le=10)


class FitnessRatingBreakdown(CategoryBreakdown):
    equipment: float = Field(..., ge=0, le=10)
    cleanliness: float = Field(..., ge=0, le=10)
    staff: float = Field(..., ge=0, le=10)
    facilities: float = Field(..., ge=0, le=10)
    value_for_money: float = Field(..., ge=0, le=10)
    atmosphere: float = Field(..., ge=0, le=10)


AnyBreakdown = Union[
    HotelRatingBreakdown,
    AttractionRatingBreakdown,
    MallRatingBreakdown,
    SchoolRatingBreakdown,
    FitnessRatingBreakdown,
]


class CategoryRatingResult(BaseModel):
    """BOK score for hotels, attractions, malls, schools and fitness places."""
    entity_type: EntityType
    overall_rating: float = Field(..., ge=0, le=10)
    rating_breakdown: AnyBreakdown
    review_sources: List[ReviewSource] = Field(default_factory=list)
    total_reviews_aggregated: int = Field(0, ge=0)
    sentiment_score: float = Field(0.0, description="Simple keyword score (-2 to 2)")
    calculated_at: str
    algorithm_version: str
