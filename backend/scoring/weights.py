"""Fixed component weights per entity type."""

import math
from typing import Dict

from models import EntityType

ALGORITHM_VERSION = "3.1"

# Default base score when an entity has no reviews at all
NEUTRAL_BASE_SCORE = 7.0

RESTAURANT_WEIGHTS: Dict[str, float] = {
    "food_quality": 0.35,
    "service": 0.25,
    "ambience": 0.20,
    "value": 0.15,
    "accessibility": 0.05,
}

HOTEL_WEIGHTS: Dict[str, float] = {
    "room_quality": 0.30,
    "service": 0.20,
    "cleanliness": 0.20,
    "location": 0.10,
    "value_for_money": 0.10,
    "amenities": 0.10,
}

ATTRACTION_WEIGHTS: Dict[str, float] = {
    "experience": 0.40,
    "cultural_value": 0.20,
    "accessibility": 0.10,
    "facilities": 0.10,
    "value_for_money": 0.10,
    "uniqueness": 0.10,
}

MALL_WEIGHTS: Dict[str, float] = {
    "variety": 0.30,
    "amenities": 0.20,
    "accessibility": 0.20,
    "cleanliness": 0.10,
    "atmosphere": 0.10,
    "value": 0.10,
}

SCHOOL_WEIGHTS: Dict[str, float] = {
    "academic_excellence": 0.30,
    "facilities_quality": 0.20,
    "teacher_quality": 0.20,
    "programs_activities": 0.10,
    "environment_safety": 0.10,
    "value_for_money": 0.10,
}

FITNESS_WEIGHTS: Dict[str, float] = {
    "equipment": 0.30,
    "cleanliness": 0.20,
    "staff": 0.20,
    "facilities": 0.10,
    "value_for_money": 0.10,
    "atmosphere": 0.10,
}

WEIGHTS_BY_TYPE: Dict[EntityType, Dict[str, float]] = {
    EntityType.RESTAURANT: RESTAURANT_WEIGHTS,
    EntityType.HOTEL: HOTEL_WEIGHTS,
    EntityType.ATTRACTION: ATTRACTION_WEIGHTS,
    EntityType.MALL: MALL_WEIGHTS,
    EntityType.SCHOOL: SCHOOL_WEIGHTS,
    EntityType.FITNESS: FITNESS_WEIGHTS,
}


def validate_weights(tolerance: float = 1e-9) -> None:
    """Raise ValueError if any weight table does not sum to 1.0."""
    for entity_type, weights in WEIGHTS_BY_TYPE.items():
        total = math.fsum(weights.values())
        if abs(total - 1.0) > tolerance:
            raise ValueError(f"Weights for {entity_type.value} sum to {total}, expected 1.0")
