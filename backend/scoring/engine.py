"""Single entry point: plain record in, validated, scored, result out."""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel

from models import (
    AttractionRatingInput,
    CategoryRatingResult,
    EntityType,
    FitnessRatingInput,
    HotelRatingInput,
    MallRatingInput,
    RestaurantRatingInput,
    RestaurantRatings,
    SchoolRatingInput,
    SentimentModifiers,
    TripAdvisorRating,
)

from .calculator import RatingCalculator
from .service import RatingService

INPUT_MODELS: Dict[EntityType, Type[BaseModel]] = {
    EntityType.RESTAURANT: RestaurantRatingInput,
    EntityType.HOTEL: HotelRatingInput,
    EntityType.ATTRACTION: AttractionRatingInput,
    EntityType.MALL: MallRatingInput,
    EntityType.SCHOOL: SchoolRatingInput,
    EntityType.FITNESS: FitnessRatingInput,
}


def parse_entity(entity_type: Union[EntityType, str], record: Any) -> BaseModel:
    """Validate a raw record into the input model for its entity type.

    Raises pydantic.ValidationError for malformed records.
    """
    model = INPUT_MODELS[EntityType(entity_type)]
    if isinstance(record, model):
        return record
    return model.model_validate(record)


def score_entity(
    entity_type: Union[EntityType, str],
    record: Any,
    *,
    tripadvisor: Optional[Union[TripAdvisorRating, Mapping[str, Any]]] = None,
    sentiment_modifiers: Optional[SentimentModifiers] = None,
    now: Optional[datetime] = None,
    calculator: Optional[RatingCalculator] = None,
    service: Optional[RatingService] = None,
) -> Union[RestaurantRatings, CategoryRatingResult]:
    """Score one entity. ``tripadvisor`` and ``sentiment_modifiers`` only apply to restaurants."""
    entity_type = EntityType(entity_type)
    data = parse_entity(entity_type, record)

    if entity_type == EntityType.RESTAURANT:
        if tripadvisor is not None and not isinstance(tripadvisor, TripAdvisorRating):
            tripadvisor = TripAdvisorRating.model_validate(tripadvisor)
        return (calculator or RatingCalculator()).calculate_ratings(
            data, tripadvisor, sentiment_modifiers, now=now
        )

    return (service or RatingService()).calculate(entity_type, data, now=now)
