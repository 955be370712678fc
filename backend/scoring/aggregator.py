"""Collect provider ratings and reduce them to one base score."""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from models import (
    RatingSource,
    RatingSources,
    RestaurantRatingInput,
    ReviewSource,
    ReviewSourceType,
    TripAdvisorRating,
)

from .sentiment import score_sentiment
from .weights import NEUTRAL_BASE_SCORE

PROVIDER_MAX_SCALE = 5.0
AI_SOURCE_BASE = 7.0


def normalize_rating(rating: float, max_scale: float = PROVIDER_MAX_SCALE) -> float:
    """Linear rescale from the provider's native scale to 0-10."""
    return (rating / max_scale) * 10


def _has_reviews(rating: Optional[float], count: Optional[int]) -> bool:
    return bool(rating) and bool(count)


# =============================================================================
# RESTAURANT VARIANT
# =============================================================================

def aggregate_sources(
    restaurant: RestaurantRatingInput,
    tripadvisor: Optional[TripAdvisorRating] = None,
) -> RatingSources:
    """Google from the restaurant record, TripAdvisor from the pre-fetched rating.

    A provider without a rating or without reviews is left out entirely.
    """
    sources = RatingSources()

    if _has_reviews(restaurant.overall_rating, restaurant.total_reviews_aggregated):
        sources.google = RatingSource(
            rating=restaurant.overall_rating,
            count=restaurant.total_reviews_aggregated,
            normalized=normalize_rating(restaurant.overall_rating),
        )

    if tripadvisor is not None and _has_reviews(tripadvisor.rating, tripadvisor.count):
        sources.tripadvisor = RatingSource(
            rating=tripadvisor.rating,
            count=tripadvisor.count,
            normalized=normalize_rating(tripadvisor.rating),
        )

    return sources


def weighted_average(sources: RatingSources) -> float:
    """Review-count weighted mean of the normalised ratings, 7.0 with no reviews."""
    total_weighted = 0.0
    total_reviews = 0
    for source in sources.present():
        total_weighted += source.normalized * source.count
        total_reviews += source.count

    if total_reviews == 0:
        return NEUTRAL_BASE_SCORE
    return total_weighted / total_reviews


def total_review_count(sources: RatingSources) -> int:
    return sum(source.count for source in sources.present())


# =============================================================================
# CATEGORY VARIANT
# =============================================================================

def build_review_sources(
    providers: Iterable[Tuple[ReviewSourceType, Optional[float], Optional[int]]] = (),
    review_sentiment: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[ReviewSource]:
    """Normalised review sources plus an optional synthetic AI source.

    ``providers`` holds ``(source, native rating, review count)`` triples.
    When the sentiment text scores non-zero it is added as a one-review source
    rated ``7 + sentiment``, so sparse entities still move with sentiment
    without it swamping real review volume.
    """
    now = now or datetime.now(timezone.utc)
    sources: List[ReviewSource] = []

    for source_type, rating, count in providers:
        if not _has_reviews(rating, count):
            continue
        sources.append(ReviewSource(
            source=source_type,
            rating=normalize_rating(rating),
            review_count=count,
            last_updated=now,
        ))

    if review_sentiment:
        sentiment = score_sentiment(review_sentiment)
        if sentiment != 0:
            sources.append(ReviewSource(
                source=ReviewSourceType.AI_ANALYSIS,
                rating=AI_SOURCE_BASE + sentiment,
                review_count=1,
                sentiment_score=sentiment,
                last_updated=now,
            ))

    return sources


def weighted_average_rating(sources: List[ReviewSource]) -> float:
    if not sources:
        return NEUTRAL_BASE_SCORE
    weighted_sum = sum(s.rating * s.review_count for s in sources)
    total = total_reviews(sources)
    return weighted_sum / total if total > 0 else NEUTRAL_BASE_SCORE


def total_reviews(sources: List[ReviewSource]) -> int:
    return sum(s.review_count for s in sources)
