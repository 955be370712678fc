"""
BOK Score Data Models
=====================
Pydantic models for entity inputs, sentiment modifiers and rating results.
"""

from .enums import EntityType, ReviewSourceType, ScoreLabel
from .entities import (
    NamedItem,
    TripAdvisorRating,
    RestaurantRatingInput,
    HotelRatingInput,
    AttractionRatingInput,
    MallRatingInput,
    SchoolRatingInput,
    FitnessRatingInput,
)
from .sentiment import KeywordCounts, SentimentModifiers
from .scoring import (
    RatingSource,
    RatingSources,
    ReviewSource,
    ComponentScores,
    RestaurantRatings,
    HotelRatingBreakdown,
    AttractionRatingBreakdown,
    MallRatingBreakdown,
    SchoolRatingBreakdown,
    FitnessRatingBreakdown,
    CategoryRatingResult,
)

__all__ = [
    # Enums
    "EntityType",
    "ReviewSourceType",
    "ScoreLabel",
    # Inputs
    "NamedItem",
    "TripAdvisorRating",
    "RestaurantRatingInput",
    "HotelRatingInput",
    "AttractionRatingInput",
    "MallRatingInput",
    "SchoolRatingInput",
    "FitnessRatingInput",
    # Sentiment
    "KeywordCounts",
    "SentimentModifiers",
    # Results
    "RatingSource",
    "RatingSources",
    "ReviewSource",
    "ComponentScores",
    "RestaurantRatings",
    "HotelRatingBreakdown",
    "AttractionRatingBreakdown",
    "MallRatingBreakdown",
    "SchoolRatingBreakdown",
    "FitnessRatingBreakdown",
    "CategoryRatingResult",
]
