"""
Category Rating Service
=======================
BOK scores for hotels, attractions, malls, schools and fitness places.

Every variant follows the same shape: review sources -> review-weighted
average -> components (average + sentiment * factor) -> weighted overall,
rounded to 2 decimals.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Type

from models import (
    AttractionRatingBreakdown,
    AttractionRatingInput,
    CategoryRatingResult,
    EntityType,
    FitnessRatingBreakdown,
    FitnessRatingInput,
    HotelRatingBreakdown,
    HotelRatingInput,
    MallRatingBreakdown,
    MallRatingInput,
    ReviewSource,
    ReviewSourceType,
    SchoolRatingBreakdown,
    SchoolRatingInput,
)
from models.entities import CategoryRatingInput
from models.scoring import CategoryBreakdown

from .aggregator import build_review_sources, total_reviews, weighted_average_rating
from .combiner import combine_category
from .components import (
    attraction_components,
    fitness_components,
    hotel_components,
    mall_components,
    school_components,
)
from .sentiment import score_sentiment
from .weights import ALGORITHM_VERSION, WEIGHTS_BY_TYPE


class RatingService:
    """Stateless; one instance can be shared or created per call."""

    def calculate_hotel_rating(self, data: HotelRatingInput,
                               now: Optional[datetime] = None) -> CategoryRatingResult:
        now = now or datetime.now(timezone.utc)
        sources = build_review_sources(
            [
                (ReviewSourceType.GOOGLE, data.google_rating, data.google_review_count),
                (ReviewSourceType.TRIPADVISOR, data.tripadvisor_rating, data.tripadvisor_review_count),
            ],
            data.review_sentiment,
            now,
        )
        return self._result(EntityType.HOTEL, data, sources, hotel_components, HotelRatingBreakdown, now)

    def calculate_attraction_rating(self, data: AttractionRatingInput,
                                    now: Optional[datetime] = None) -> CategoryRatingResult:
        now = now or datetime.now(timezone.utc)
        sources = build_review_sources(
            [
                (ReviewSourceType.GOOGLE, data.google_rating, data.google_review_count),
                (ReviewSourceType.TRIPADVISOR, data.tripadvisor_rating, data.tripadvisor_review_count),
            ],
            data.review_sentiment,
            now,
        )
        return self._result(EntityType.ATTRACTION, data, sources, attraction_components,
                            AttractionRatingBreakdown, now)

    def calculate_mall_rating(self, data: MallRatingInput,
                              now: Optional[datetime] = None) -> CategoryRatingResult:
        now = now or datetime.now(timezone.utc)
        sources = build_review_sources(
            [(ReviewSourceType.GOOGLE, data.google_rating, data.google_review_count)],
            data.review_sentiment,
            now,
        )
        return self._result(EntityType.MALL, data, sources, mall_components, MallRatingBreakdown, now)

    def calculate_school_rating(self, data: SchoolRatingInput,
                                now: Optional[datetime] = None) -> CategoryRatingResult:
        now = now or datetime.now(timezone.utc)
        # Schools carry no provider ratings; only the sentiment source counts
        sources = build_review_sources([], data.review_sentiment, now)
        return self._result(
            EntityType.SCHOOL,
            data,
            sources,
            lambda _average, sentiment: school_components(sentiment),
            SchoolRatingBreakdown,
            now,
        )

    def calculate_fitness_rating(self, data: FitnessRatingInput,
                                 now: Optional[datetime] = None) -> CategoryRatingResult:
        now = now or datetime.now(timezone.utc)
        sources = build_review_sources(
            [(ReviewSourceType.GOOGLE, data.google_rating, data.google_review_count)],
            data.review_sentiment,
            now,
        )
        return self._result(EntityType.FITNESS, data, sources, fitness_components,
                            FitnessRatingBreakdown, now)

    def calculate(self, entity_type: EntityType, data: CategoryRatingInput,
                  now: Optional[datetime] = None) -> CategoryRatingResult:
        handlers: Dict[EntityType, Callable] = {
            EntityType.HOTEL: self.calculate_hotel_rating,
            EntityType.ATTRACTION: self.calculate_attraction_rating,
            EntityType.MALL: self.calculate_mall_rating,
            EntityType.SCHOOL: self.calculate_school_rating,
            EntityType.FITNESS: self.calculate_fitness_rating,
        }
        if entity_type not in handlers:
            raise ValueError(f"No category rating for entity type: {entity_type}")
        return handlers[entity_type](data, now=now)

    def _result(
        self,
        entity_type: EntityType,
        data: CategoryRatingInput,
        sources: List[ReviewSource],
        components_fn: Callable[[float, float], Dict[str, float]],
        breakdown_cls: Type[CategoryBreakdown],
        now: datetime,
    ) -> CategoryRatingResult:
        average = weighted_average_rating(sources)
        sentiment = score_sentiment(data.review_sentiment)
        components = components_fn(average, sentiment)
        calculated_at = now.isoformat()

        breakdown = breakdown_cls(
            **components,
            calculated_at=calculated_at,
            algorithm_version=ALGORITHM_VERSION,
        )
        return CategoryRatingResult(
            entity_type=entity_type,
            overall_rating=combine_category(components, WEIGHTS_BY_TYPE[entity_type]),
            rating_breakdown=breakdown,
            review_sources=sources,
            total_reviews_aggregated=total_reviews(sources),
            sentiment_score=sentiment,
            calculated_at=calculated_at,
            algorithm_version=ALGORITHM_VERSION,
        )
