from types import SimpleNamespace

import pytest

from etl.storage import PersistenceError, RatingSink, fetch_entities, rating_payload
from models import EntityType, HotelRatingInput, MallRatingInput, RestaurantRatingInput, SchoolRatingInput
from scoring import RatingCalculator, RatingService


class FakeQuery:
    """Records the chained Supabase query calls."""

    def __init__(self, table, data=None, fail=False):
        self.table_name = table
        self.data = data or []
        self.fail = fail
        self.calls = []

    def __getattr__(self, name):
        def method(*args):
            self.calls.append((name, args))
            return self
        return method

    def execute(self):
        if self.fail:
            raise RuntimeError("connection reset")
        return SimpleNamespace(data=self.data)


class FakeSupabase:
    def __init__(self, data=None, fail=False):
        self.data = data
        self.fail = fail
        self.queries = []

    def table(self, name):
        query = FakeQuery(name, self.data, self.fail)
        self.queries.append(query)
        return query


def test_fetch_missing_only():
    client = FakeSupabase(data=[{"id": "h-1"}])
    rows = fetch_entities(client, EntityType.HOTEL, only_missing=True, limit=5)

    assert rows == [{"id": "h-1"}]
    query = client.queries[0]
    assert query.table_name == "hotels"
    assert query.calls == [("select", ("*",)), ("is_", ("bok_score", "null")), ("limit", (5,))]


def test_fetch_restaurants_uses_overall_score():
    client = FakeSupabase()
    assert fetch_entities(client, EntityType.RESTAURANT, only_missing=True) == []
    assert ("is_", ("overall_score", "null")) in client.queries[0].calls


def test_category_payload(fixed_now):
    result = RatingService().calculate_hotel_rating(HotelRatingInput(google_rating=4.0, google_review_count=10),
                                                   now=fixed_now)
    payload = rating_payload(result)

    assert set(payload) == {
        "bok_score", "bok_score_breakdown", "total_reviews_aggregated",
        "bok_score_calculated_at", "bok_score_version",
    }
    assert payload["bok_score"] == result.overall_rating
    assert payload["bok_score_breakdown"]["room_quality"] == 8.0
    assert payload["bok_score_version"] == "3.1"


def test_restaurant_payload(google_restaurant, fixed_now):
    ratings = RatingCalculator().calculate_ratings(RestaurantRatingInput.model_validate(google_restaurant),
                                                   now=fixed_now)
    payload = rating_payload(ratings)

    assert payload["overall_score"] == 8.4
    assert payload["score_label"] == "Excellent"
    assert payload["rating_sources"]["google"]["count"] == 150
    assert payload["algorithm_version"] == "3.1"


def test_sink_updates_by_id(fixed_now):
    client = FakeSupabase()
    result = RatingService().calculate_mall_rating(MallRatingInput(), now=fixed_now)

    RatingSink(client).save(EntityType.MALL, "m-9", result)

    query = client.queries[0]
    assert query.table_name == "malls"
    assert query.calls[0][0] == "update"
    assert query.calls[1] == ("eq", ("id", "m-9"))


def test_sink_wraps_errors(fixed_now):
    client = FakeSupabase(fail=True)
    result = RatingService().calculate_school_rating(SchoolRatingInput(), now=fixed_now)

    with pytest.raises(PersistenceError, match="schools/s-1"):
        RatingSink(client).save(EntityType.SCHOOL, "s-1", result)


def test_restaurant_payload_omits_missing_provider(google_restaurant, fixed_now):
    ratings = RatingCalculator().calculate_ratings(RestaurantRatingInput.model_validate(google_restaurant),
                                                   now=fixed_now)
    payload = rating_payload(ratings)

    assert "tripadvisor" not in payload["rating_sources"]
    assert set(payload["rating_sources"]) == {"google"}
