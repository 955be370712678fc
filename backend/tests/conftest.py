from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now():
    return datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def google_restaurant():
    """Single Google source, one WiFi feature, no sentiment."""
    return {
        "id": "r-1",
        "name": "Trattoria Roma",
        "slug": "trattoria-roma",
        "overall_rating": 4.2,
        "total_reviews_aggregated": 150,
        "price_level": 2,
        "features": [{"name": "WiFi"}],
        "cuisines": [{"name": "Italian"}],
    }


@pytest.fixture
def empty_restaurant():
    return {"id": "r-0", "name": "New Place", "slug": "new-place"}
