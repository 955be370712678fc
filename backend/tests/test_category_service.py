import pytest

from models import (
    AttractionRatingInput,
    EntityType,
    FitnessRatingInput,
    HotelRatingInput,
    MallRatingInput,
    ReviewSourceType,
    SchoolRatingInput,
)
from scoring import RatingService, WEIGHTS_BY_TYPE, validate_weights


@pytest.fixture
def service():
    return RatingService()


def test_weight_tables_sum_to_one():
    validate_weights()
    for weights in WEIGHTS_BY_TYPE.values():
        assert sum(weights.values()) == pytest.approx(1.0)


class TestHotel:
    def test_google_plus_sentiment(self, service, fixed_now):
        hotel = HotelRatingInput(
            id="h-1",
            name="Harbour View",
            google_rating=4.5,
            google_review_count=200,
            review_sentiment="great service and friendly staff",
        )
        result = service.calculate_hotel_rating(hotel, now=fixed_now)
        breakdown = result.rating_breakdown

        assert result.entity_type == EntityType.HOTEL
        assert result.sentiment_score == pytest.approx(0.4)
        assert breakdown.room_quality == 9.19
        assert breakdown.service == 9.15
        assert breakdown.cleanliness == 9.23
        assert breakdown.location == 8.99
        assert breakdown.value_for_money == 9.11
        assert breakdown.amenities == 8.99
        assert result.overall_rating == 9.14
        assert result.total_reviews_aggregated == 201
        assert [s.source for s in result.review_sources] == [
            ReviewSourceType.GOOGLE,
            ReviewSourceType.AI_ANALYSIS,
        ]

    def test_timestamps_shared(self, service, fixed_now):
        result = service.calculate_hotel_rating(HotelRatingInput(google_rating=4.0, google_review_count=5),
                                                now=fixed_now)
        assert result.calculated_at == fixed_now.isoformat()
        assert result.rating_breakdown.calculated_at == result.calculated_at
        assert result.review_sources[0].last_updated == fixed_now
        assert result.algorithm_version == "3.1"

    def test_tripadvisor_counts(self, service):
        hotel = HotelRatingInput(
            google_rating=4.0, google_review_count=100,
            tripadvisor_rating=5.0, tripadvisor_review_count=100,
        )
        result = service.calculate_hotel_rating(hotel)
        assert result.rating_breakdown.location == 9.0
        assert result.total_reviews_aggregated == 200

    def test_components_clamped_to_ten(self, service):
        hotel = HotelRatingInput(
            google_rating=5.0,
            google_review_count=100,
            review_sentiment="excellent great good amazing love best delicious friendly",
        )
        result = service.calculate_hotel_rating(hotel)
        assert result.rating_breakdown.room_quality == 10.0
        assert result.rating_breakdown.cleanliness == 10.0
        assert result.overall_rating <= 10.0


def test_attraction_without_data(service):
    result = service.calculate_attraction_rating(AttractionRatingInput(name="Old Fort"))
    assert result.rating_breakdown.experience == 7.0
    assert result.rating_breakdown.uniqueness == 7.5
    assert result.overall_rating == pytest.approx(7.05)
    assert result.review_sources == []
    assert result.total_reviews_aggregated == 0


def test_mall_without_data(service):
    result = service.calculate_mall_rating(MallRatingInput(name="City Centre"))
    assert result.rating_breakdown.variety == 7.5
    assert result.overall_rating == pytest.approx(7.15)


def test_mall_ignores_tripadvisor_fields(service):
    mall = MallRatingInput.model_validate({"tripadvisor_rating": 5.0, "tripadvisor_review_count": 999})
    result = service.calculate_mall_rating(mall)
    assert result.review_sources == []


def test_fitness_without_data(service):
    result = service.calculate_fitness_rating(FitnessRatingInput(name="Iron Gym"))
    assert result.overall_rating == 7.0
    assert set(result.rating_breakdown.component_scores()) == set(WEIGHTS_BY_TYPE[EntityType.FITNESS])


class TestSchool:
    def test_priors_only(self, service):
        result = service.calculate_school_rating(SchoolRatingInput(name="Green Valley"))
        assert result.rating_breakdown.environment_safety == 8.5
        assert result.overall_rating == pytest.approx(7.8)
        assert result.total_reviews_aggregated == 0

    def test_provider_ratings_ignored(self, service):
        school = SchoolRatingInput(google_rating=1.0, google_review_count=500)
        result = service.calculate_school_rating(school)
        assert result.overall_rating == pytest.approx(7.8)
        assert result.review_sources == []

    def test_sentiment_moves_academics_and_teachers(self, service):
        school = SchoolRatingInput(review_sentiment="excellent teachers, great")
        result = service.calculate_school_rating(school)
        assert result.rating_breakdown.academic_excellence == 8.4
        assert result.rating_breakdown.teacher_quality == 8.4
        assert result.rating_breakdown.facilities_quality == 7.5
        assert result.total_reviews_aggregated == 1


def test_calculate_dispatches_by_type(service):
    result = service.calculate(EntityType.MALL, MallRatingInput())
    assert result.entity_type == EntityType.MALL


def test_calculate_rejects_restaurants(service):
    with pytest.raises(ValueError):
        service.calculate(EntityType.RESTAURANT, HotelRatingInput())
