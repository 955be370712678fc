"""Component scores: base score + feature bonuses + sentiment, clamped to 0-10."""

from typing import Dict, Optional

from models import ComponentScores, RestaurantRatingInput, SentimentModifiers

from .numeric import clamp_category, clamp_score, matches_any

DEFAULT_PRICE_LEVEL = 2
DETAILED_DESCRIPTION_LENGTH = 200

# Feature aliases matched by case-insensitive substring
CHEF_SPECIAL = ["Chef Special"]
RESERVATIONS = ["Reservations"]
TABLE_SERVICE = ["Waiter Service", "Table Service"]
OUTDOOR = ["Outdoor"]
LIVE_MUSIC = ["Live Music"]
FINE_DINING = ["Fine Dining"]
ROMANTIC = ["Romantic"]
WHEELCHAIR = ["Wheelchair"]
PARKING = ["Parking"]
RESTROOM = ["Restroom"]
WIFI = ["WiFi"]

# Share of each modifier applied to its component
FOOD_QUALITY_IMPACT = 1.0
SERVICE_IMPACT = 0.8
AMBIENCE_IMPACT = 0.8
VALUE_IMPACT = 0.6
ACCESSIBILITY_IMPACT = 0.3


def has_feature(restaurant: RestaurantRatingInput, aliases) -> bool:
    return matches_any((f.name for f in restaurant.features), aliases)


def has_cuisine(restaurant: RestaurantRatingInput, aliases) -> bool:
    return matches_any((c.name for c in restaurant.cuisines), aliases)


def _price_level(restaurant: RestaurantRatingInput) -> int:
    return restaurant.price_level or DEFAULT_PRICE_LEVEL


# =============================================================================
# RESTAURANT COMPONENTS
# =============================================================================

def food_quality(restaurant: RestaurantRatingInput, base: float,
                 modifiers: Optional[SentimentModifiers] = None) -> float:
    score = base
    if restaurant.description and len(restaurant.description) > DETAILED_DESCRIPTION_LENGTH:
        score += 0.1
    if has_feature(restaurant, CHEF_SPECIAL):
        score += 0.2
    if modifiers:
        score += modifiers.food_quality_modifier * FOOD_QUALITY_IMPACT
    return clamp_score(score)


def service(restaurant: RestaurantRatingInput, base: float,
            modifiers: Optional[SentimentModifiers] = None) -> float:
    score = base
    # Higher price points assume table service
    if _price_level(restaurant) >= 3:
        score += 0.15
    if has_feature(restaurant, RESERVATIONS):
        score += 0.1
    if has_feature(restaurant, TABLE_SERVICE):
        score += 0.15
    if modifiers:
        score += modifiers.service_modifier * SERVICE_IMPACT
    return clamp_score(score)


def ambience(restaurant: RestaurantRatingInput, base: float,
             modifiers: Optional[SentimentModifiers] = None) -> float:
    score = base
    if has_feature(restaurant, OUTDOOR):
        score += 0.15
    if has_feature(restaurant, LIVE_MUSIC):
        score += 0.1
    if has_cuisine(restaurant, FINE_DINING):
        score += 0.2
    if has_feature(restaurant, ROMANTIC):
        score += 0.1
    if modifiers:
        score += modifiers.ambience_modifier * AMBIENCE_IMPACT
    return clamp_score(score)


def value(restaurant: RestaurantRatingInput, base: float,
          modifiers: Optional[SentimentModifiers] = None) -> float:
    score = base
    price_level = _price_level(restaurant)
    if price_level == 1:
        score += 0.1
    elif price_level == 4:
        score -= 0.1
    if modifiers:
        score += modifiers.value_modifier * VALUE_IMPACT
    return clamp_score(score)


def accessibility(restaurant: RestaurantRatingInput, base: float,
                  modifiers: Optional[SentimentModifiers] = None) -> float:
    score = base
    if has_feature(restaurant, WHEELCHAIR):
        score += 0.3
    if has_feature(restaurant, PARKING):
        score += 0.15
    if has_feature(restaurant, RESTROOM):
        score += 0.1
    if has_feature(restaurant, WIFI):
        score += 0.1
    if modifiers:
        score += modifiers.accessibility_modifier * ACCESSIBILITY_IMPACT
    return clamp_score(score)


def restaurant_components(restaurant: RestaurantRatingInput, base: float,
                          modifiers: Optional[SentimentModifiers] = None) -> ComponentScores:
    return ComponentScores(
        food_quality=food_quality(restaurant, base, modifiers),
        service=service(restaurant, base, modifiers),
        ambience=ambience(restaurant, base, modifiers),
        value=value(restaurant, base, modifiers),
        accessibility=accessibility(restaurant, base, modifiers),
    )


# =============================================================================
# CATEGORY COMPONENTS
# =============================================================================
# Each component is average + sentiment * factor (+ a fixed offset for a few),
# clamped and rounded to 2 decimals.

HOTEL_SENTIMENT_FACTORS = {
    "room_quality": 0.5,
    "service": 0.4,
    "cleanliness": 0.6,
    "location": 0.0,
    "value_for_money": 0.3,
    "amenities": 0.0,
}

ATTRACTION_SENTIMENT_FACTORS = {
    "experience": 0.5,
    "cultural_value": 0.3,
    "accessibility": 0.0,
    "facilities": 0.0,
    "value_for_money": 0.2,
    "uniqueness": 0.0,
}
ATTRACTION_OFFSETS = {"uniqueness": 0.5}

MALL_SENTIMENT_FACTORS = {
    "variety": 0.0,
    "amenities": 0.0,
    "accessibility": 0.0,
    "cleanliness": 0.4,
    "atmosphere": 0.3,
    "value": 0.0,
}
MALL_OFFSETS = {"variety": 0.5}

FITNESS_SENTIMENT_FACTORS = {
    "equipment": 0.5,
    "cleanliness": 0.6,
    "staff": 0.4,
    "facilities": 0.0,
    "value_for_money": 0.2,
    "atmosphere": 0.3,
}

# Schools are scored from fixed priors, not review averages
SCHOOL_BASE_SCORES = {
    "academic_excellence": 8.0,
    "facilities_quality": 7.5,
    "teacher_quality": 8.0,
    "programs_activities": 7.0,
    "environment_safety": 8.5,
    "value_for_money": 7.5,
}
SCHOOL_SENTIMENT_FACTORS = {
    "academic_excellence": 1.0,
    "teacher_quality": 1.0,
}


def category_components(
    average: float,
    sentiment: float,
    factors: Dict[str, float],
    offsets: Optional[Dict[str, float]] = None,
) -> Dict[str, float]:
    offsets = offsets or {}
    return {
        name: clamp_category(average + offsets.get(name, 0.0) + sentiment * factor)
        for name, factor in factors.items()
    }


def hotel_components(average: float, sentiment: float) -> Dict[str, float]:
    return category_components(average, sentiment, HOTEL_SENTIMENT_FACTORS)


def attraction_components(average: float, sentiment: float) -> Dict[str, float]:
    return category_components(average, sentiment, ATTRACTION_SENTIMENT_FACTORS, ATTRACTION_OFFSETS)


def mall_components(average: float, sentiment: float) -> Dict[str, float]:
    return category_components(average, sentiment, MALL_SENTIMENT_FACTORS, MALL_OFFSETS)


def fitness_components(average: float, sentiment: float) -> Dict[str, float]:
    return category_components(average, sentiment, FITNESS_SENTIMENT_FACTORS)


def school_components(sentiment: float) -> Dict[str, float]:
    return {
        name: clamp_category(base + sentiment * SCHOOL_SENTIMENT_FACTORS.get(name, 0.0))
        for name, base in SCHOOL_BASE_SCORES.items()
    }
