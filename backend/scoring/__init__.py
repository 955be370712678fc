"""
BOK Score Engine
================
Deterministic multi-source rating pipeline:
aggregate sources -> component scores -> weighted overall -> label.
"""

from .aggregator import aggregate_sources, normalize_rating, weighted_average
from .calculator import RatingCalculator
from .combiner import combine
from .engine import parse_entity, score_entity
from .labels import score_label
from .sentiment import SentimentAnalyzer, keyword_impact_modifiers, score_sentiment
from .service import RatingService
from .weights import ALGORITHM_VERSION, NEUTRAL_BASE_SCORE, WEIGHTS_BY_TYPE, validate_weights

__all__ = [
    "aggregate_sources",
    "normalize_rating",
    "weighted_average",
    "RatingCalculator",
    "combine",
    "parse_entity",
    "score_entity",
    "score_label",
    "SentimentAnalyzer",
    "keyword_impact_modifiers",
    "score_sentiment",
    "RatingService",
    "ALGORITHM_VERSION",
    "NEUTRAL_BASE_SCORE",
    "WEIGHTS_BY_TYPE",
    "validate_weights",
]
