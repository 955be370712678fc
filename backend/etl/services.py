from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from analyzer_openai import get_sentiment_backend
from scoring import RatingCalculator, RatingService, SentimentAnalyzer

from .db import get_supabase
from .storage import RatingSink


@dataclass
class Services:
    """Container for everything a rating run needs."""
    calculator: RatingCalculator
    service: RatingService
    analyzer: Optional[SentimentAnalyzer] = None
    sink: Optional[RatingSink] = None


@contextmanager
def create_services(analyzer: Optional[str] = None, dry_run: bool = False) -> Iterator[Services]:
    """
    Wire up the rating services.

    Usage:
        with create_services(analyzer="keyword") as services:
            worker = RatingWorker(services.calculator, services.service, ...)

    ``sink`` is None for dry runs or when Supabase is not configured.
    """
    backend = get_sentiment_backend(analyzer)
    supabase = None if dry_run else get_supabase()

    services = Services(
        calculator=RatingCalculator(),
        service=RatingService(),
        analyzer=SentimentAnalyzer(backend) if backend else None,
        sink=RatingSink(supabase) if supabase else None,
    )

    yield services
