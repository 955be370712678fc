"""
Rating Storage
==============
Reads entity rows from Supabase and writes computed ratings back.

- Restaurants: score columns on the `restaurants` row
- Everything else: `bok_score*` columns on the entity's table
"""

import logging
from typing import Any, Dict, List, Optional, Union

from supabase import Client

from models import CategoryRatingResult, EntityType, RestaurantRatings

logger = logging.getLogger(__name__)

ENTITY_TABLES: Dict[EntityType, str] = {
    EntityType.RESTAURANT: "restaurants",
    EntityType.HOTEL: "hotels",
    EntityType.ATTRACTION: "attractions",
    EntityType.MALL: "malls",
    EntityType.SCHOOL: "schools",
    EntityType.FITNESS: "fitness_places",
}

# Column that is null until an entity has been scored
SCORE_COLUMNS: Dict[EntityType, str] = {
    entity_type: ("overall_score" if entity_type == EntityType.RESTAURANT else "bok_score")
    for entity_type in EntityType
}


class PersistenceError(Exception):
    """Raised when a rating cannot be written back to storage."""


def fetch_entities(
    client: Client,
    entity_type: EntityType,
    only_missing: bool = False,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Load raw entity rows for scoring."""
    query = client.table(ENTITY_TABLES[entity_type]).select("*")
    if only_missing:
        query = query.is_(SCORE_COLUMNS[entity_type], "null")
    if limit:
        query = query.limit(limit)
    result = query.execute()
    return result.data or []


def rating_payload(result: Union[RestaurantRatings, CategoryRatingResult]) -> Dict[str, Any]:
    """Columns to update for one computed rating."""
    if isinstance(result, RestaurantRatings):
        payload = result.model_dump(mode="json")
        # Absent providers are left out, not written as null
        payload["rating_sources"] = result.rating_sources.model_dump(mode="json", exclude_none=True)
        return payload

    return {
        "bok_score": result.overall_rating,
        "bok_score_breakdown": result.rating_breakdown.model_dump(mode="json"),
        "total_reviews_aggregated": result.total_reviews_aggregated,
        "bok_score_calculated_at": result.calculated_at,
        "bok_score_version": result.algorithm_version,
    }


class RatingSink:
    """Writes ratings to the entity row keyed by id."""

    def __init__(self, client: Client):
        self.client = client

    def save(
        self,
        entity_type: EntityType,
        entity_id: str,
        result: Union[RestaurantRatings, CategoryRatingResult],
    ) -> None:
        table = ENTITY_TABLES[entity_type]
        try:
            self.client.table(table).update(rating_payload(result)).eq("id", entity_id).execute()
        except Exception as e:
            raise PersistenceError(f"Failed to update {table}/{entity_id}: {e}") from e
        logger.debug(f"Saved rating for {table}/{entity_id}")
