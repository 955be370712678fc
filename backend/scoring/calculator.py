"""
Restaurant Rating Calculator
============================
Sources -> weighted base score -> five component scores -> weighted overall
score -> label. Pure: no I/O, no shared state.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from models import (
    RestaurantRatingInput,
    RestaurantRatings,
    SentimentModifiers,
    TripAdvisorRating,
)

from .aggregator import aggregate_sources, total_review_count, weighted_average
from .combiner import combine_restaurant
from .components import restaurant_components
from .labels import score_label
from .numeric import round_restaurant
from .weights import ALGORITHM_VERSION, RESTAURANT_WEIGHTS

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


class RatingCalculator:
    """Restaurant scoring pipeline."""

    def calculate_ratings(
        self,
        restaurant: RestaurantRatingInput,
        tripadvisor: Optional[TripAdvisorRating] = None,
        sentiment_modifiers: Optional[SentimentModifiers] = None,
        now: Optional[datetime] = None,
    ) -> RestaurantRatings:
        sources = aggregate_sources(restaurant, tripadvisor)
        base_score = weighted_average(sources)
        components = restaurant_components(restaurant, base_score, sentiment_modifiers)
        overall = combine_restaurant(components.model_dump(), RESTAURANT_WEIGHTS)

        logger.debug(
            f"{restaurant.name or restaurant.id}: base {base_score:.2f} -> overall {overall}"
        )

        return RestaurantRatings(
            overall_score=overall,
            score_label=score_label(overall),
            food_quality_score=round_restaurant(components.food_quality),
            service_score=round_restaurant(components.service),
            ambience_score=round_restaurant(components.ambience),
            value_score=round_restaurant(components.value),
            accessibility_score=round_restaurant(components.accessibility),
            rating_sources=sources,
            total_review_count=total_review_count(sources),
            sentiment_analyzed=bool(sentiment_modifiers and sentiment_modifiers.analyzed),
            last_rating_update=utc_timestamp(now),
            algorithm_version=ALGORITHM_VERSION,
        )
