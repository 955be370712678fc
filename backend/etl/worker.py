"""
Batch Rating Worker
===================
Recalculates ratings for a list of entity rows, one at a time, with a pause
between items to stay under external API rate limits (the sentiment call).
A bad row is recorded as a failure and the run continues.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from models import EntityType, RestaurantRatingInput, RestaurantRatings, TripAdvisorRating
from scoring import RatingCalculator, RatingService, SentimentAnalyzer, parse_entity, score_entity

from .storage import SCORE_COLUMNS, RatingSink

logger = logging.getLogger(__name__)


# =============================================================================
# BATCH STATS
# =============================================================================

@dataclass
class BatchFailure:
    entity_id: Optional[str]
    name: str
    reason: str


@dataclass
class BatchStats:
    processed: int = 0
    succeeded: int = 0
    skipped: int = 0
    failures: List[BatchFailure] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def summary(self) -> str:
        elapsed = datetime.now() - self.start_time
        lines = [
            f"\n{'='*50}\nBatch Summary\n{'='*50}",
            f"Duration: {elapsed.total_seconds():.1f}s",
            f"Total processed: {self.processed}",
            f"Successful: {self.succeeded}",
            f"Skipped: {self.skipped}",
            f"Failed: {self.failed}",
        ]
        if self.failures:
            lines.append("\nFailed entities:")
            lines.extend(f"  - {f.name} ({f.entity_id or 'no id'}): {f.reason}" for f in self.failures)
        return "\n".join(lines) + "\n"


# =============================================================================
# WORKER
# =============================================================================

def tripadvisor_from_record(record: Dict[str, Any]) -> Optional[TripAdvisorRating]:
    """Restaurant rows may carry a previously fetched TripAdvisor rating."""
    rating = record.get("tripadvisor_rating")
    if not rating:
        return None
    return TripAdvisorRating(rating=rating, count=record.get("tripadvisor_review_count") or 0)


class RatingWorker:
    """Sequential scoring loop. ``sink=None`` means dry run."""

    def __init__(
        self,
        calculator: Optional[RatingCalculator] = None,
        service: Optional[RatingService] = None,
        analyzer: Optional[SentimentAnalyzer] = None,
        sink: Optional[RatingSink] = None,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.calculator = calculator or RatingCalculator()
        self.service = service or RatingService()
        self.analyzer = analyzer
        self.sink = sink
        self.delay = delay
        self.sleep = sleep
        self.results: List[Dict[str, Any]] = []

    def run(
        self,
        entity_type: EntityType,
        records: List[Dict[str, Any]],
        only_missing: bool = False,
    ) -> BatchStats:
        stats = BatchStats()
        total = len(records)
        logger.info(f"Scoring {total} {entity_type.value} records")

        for index, record in enumerate(records):
            name = str(record.get("name") or "unknown")
            entity_id = record.get("id")
            logger.info(f"[{index + 1}/{total}] Processing: {name}")

            if only_missing and record.get(SCORE_COLUMNS[entity_type]) is not None:
                logger.info(f"  Skipping {name}: already scored")
                stats.skipped += 1
                continue

            stats.processed += 1
            try:
                if not entity_id:
                    raise ValueError("record has no id")
                result = self.score(entity_type, record)
                if self.sink is not None:
                    self.sink.save(entity_type, str(entity_id), result)
                self.results.append({
                    "id": str(entity_id),
                    "name": name,
                    "entity_type": entity_type.value,
                    "rating": result.model_dump(mode="json"),
                })
                stats.succeeded += 1
            except Exception as e:
                logger.error(f"  Failed to process {name} ({entity_id}): {e}")
                stats.failures.append(BatchFailure(entity_id=entity_id, name=name, reason=str(e)[:200]))

            if self.delay and index < total - 1:
                self.sleep(self.delay)

        return stats

    def score(self, entity_type: EntityType, record: Dict[str, Any]):
        if entity_type != EntityType.RESTAURANT:
            result = score_entity(entity_type, record, service=self.service)
            logger.info(f"  BOK Score: {result.overall_rating:.2f}/10")
            return result

        restaurant: RestaurantRatingInput = parse_entity(entity_type, record)
        modifiers = self.analyzer.analyze(restaurant.reviews) if self.analyzer else None
        if modifiers is not None and modifiers.analyzed:
            logger.info(
                f"  Sentiment: food {modifiers.food_quality_modifier:+.2f}, "
                f"service {modifiers.service_modifier:+.2f}"
            )

        result: RestaurantRatings = score_entity(
            entity_type,
            restaurant,
            tripadvisor=tripadvisor_from_record(record),
            sentiment_modifiers=modifiers,
            calculator=self.calculator,
        )
        logger.info(f"  Overall: {result.overall_score}/10 ({result.score_label.value})")
        return result
