import pytest
from pydantic import ValidationError

from models import CategoryRatingResult, EntityType, HotelRatingInput, RestaurantRatings
from scoring import parse_entity, score_entity
from scoring.numeric import round_half_up


def test_restaurant_record(google_restaurant, fixed_now):
    result = score_entity("restaurant", google_restaurant, now=fixed_now)
    assert isinstance(result, RestaurantRatings)
    assert result.overall_score == 8.4


def test_restaurant_with_tripadvisor_dict():
    record = {"id": 7, "overall_rating": 4.0, "total_reviews_aggregated": 100}
    result = score_entity(EntityType.RESTAURANT, record, tripadvisor={"rating": 5.0, "count": 100})
    assert result.total_review_count == 200
    assert result.rating_sources.tripadvisor.count == 100


def test_category_record(fixed_now):
    result = score_entity("hotel", {"id": 12, "google_rating": 4.0, "google_review_count": 10}, now=fixed_now)
    assert isinstance(result, CategoryRatingResult)
    assert result.entity_type == EntityType.HOTEL
    assert result.rating_breakdown.location == 8.0


def test_parse_entity_coerces():
    restaurant = parse_entity("restaurant", {
        "id": 42,
        "price_level": "$$$",
        "features": '["WiFi", {"name": "Parking"}]',
        "cuisines": "Thai",
        "reviews": None,
    })
    assert restaurant.id == "42"
    assert restaurant.price_level == 3
    assert [f.name for f in restaurant.features] == ["WiFi", "Parking"]
    assert [c.name for c in restaurant.cuisines] == ["Thai"]
    assert restaurant.reviews == []


def test_parse_entity_passes_models_through():
    hotel = HotelRatingInput(name="Inn")
    assert parse_entity(EntityType.HOTEL, hotel) is hotel


def test_invalid_price_level():
    with pytest.raises(ValidationError):
        parse_entity("restaurant", {"id": "r", "price_level": 7})


def test_rating_out_of_range():
    with pytest.raises(ValidationError):
        parse_entity("hotel", {"google_rating": 6.5})


def test_unknown_entity_type():
    with pytest.raises(ValueError):
        score_entity("spa", {})


@pytest.mark.parametrize(
    "value,places,expected",
    [(8.25, 1, 8.3), (7.125, 2, 7.13), (2.5, 0, 3.0), (-0.5, 0, 0.0)],
)
def test_round_half_up(value, places, expected):
    assert round_half_up(value, places) == expected


@pytest.mark.parametrize("price_level", [0, "0", "", None])
def test_unset_price_level_uses_default(price_level):
    record = {"id": "r", "overall_rating": 4.0, "total_reviews_aggregated": 10, "price_level": price_level}
    result = score_entity("restaurant", record)
    assert parse_entity("restaurant", record).price_level is None
    assert result.value_score == 8.0
    assert result.overall_score == 8.0
