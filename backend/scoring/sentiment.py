"""Keyword sentiment scoring.

Two separate scorers with different output shapes:

- ``score_sentiment``: one free-text summary -> a single number in [-2, 2].
  Used by the hotel/attraction/mall/school/fitness variants.
- ``SentimentAnalyzer``: a batch of restaurant reviews -> per-component
  ``SentimentModifiers``. The backend doing the keyword-impact work is
  injected (local rules below, or the OpenAI backend in analyzer_openai).
"""

import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional

from models import SentimentModifiers

from .numeric import clamp_score, round_category

logger = logging.getLogger(__name__)

# =============================================================================
# SIMPLE SCORER
# =============================================================================

POSITIVE_KEYWORDS = ["excellent", "great", "good", "amazing", "love", "best", "delicious", "friendly"]
NEGATIVE_KEYWORDS = ["bad", "poor", "worst", "rude", "dirty", "expensive", "slow", "avoid"]
POSITIVE_WEIGHT = 0.2
NEGATIVE_WEIGHT = -0.3
SENTIMENT_LIMIT = 2.0


def score_sentiment(text: Optional[str]) -> float:
    """Bag-of-words score in [-2, 2].

    Substring containment, so each keyword counts at most once per text and
    "goodness" still matches "good".
    """
    if not text:
        return 0.0
    lower_text = text.lower()
    score = 0.0
    for word in POSITIVE_KEYWORDS:
        if word in lower_text:
            score += POSITIVE_WEIGHT
    for word in NEGATIVE_KEYWORDS:
        if word in lower_text:
            score += NEGATIVE_WEIGHT
    return clamp_score(score, -SENTIMENT_LIMIT, SENTIMENT_LIMIT)


# =============================================================================
# KEYWORD IMPACT RULES (restaurant reviews)
# =============================================================================

FOOD_QUALITY = "foodQualityModifier"
SERVICE = "serviceModifier"
AMBIENCE = "ambienceModifier"
VALUE = "valueModifier"
ACCESSIBILITY = "accessibilityModifier"

MODIFIER_KEYS = [FOOD_QUALITY, SERVICE, AMBIENCE, VALUE, ACCESSIBILITY]
MODIFIER_LIMIT = 3.0

# tier -> (impact per occurrence, {keyword: home component or None})
IMPACT_TIERS: Dict[str, tuple] = {
    "criticalNegative": (-0.8, {
        "dirty": AMBIENCE,
        "food poisoning": FOOD_QUALITY,
        "rude": SERVICE,
        "worst": None,
        "terrible": None,
        "awful": None,
    }),
    "moderateNegative": (-0.4, {
        "slow service": SERVICE,
        "overpriced": VALUE,
        "disappointing": None,
        "mediocre": None,
    }),
    "minorNegative": (-0.2, {
        "average": None,
        "nothing special": None,
        "okay": None,
    }),
    "positive": (0.3, {
        "excellent": None,
        "amazing": None,
        "highly recommend": None,
        "delicious": FOOD_QUALITY,
        "outstanding": None,
        "perfect": None,
    }),
}

# Prefix-matched, so "dish" covers "dishes" and "price" covers "prices"
TOPIC_WORDS: Dict[str, List[str]] = {
    FOOD_QUALITY: ["food", "taste", "tasty", "flavor", "flavour", "dish", "menu", "cook",
                   "meal", "ingredient", "dessert", "chef"],
    SERVICE: ["service", "staff", "waiter", "waitress", "server", "attentive", "friendly",
              "manager", "host"],
    AMBIENCE: ["atmosphere", "ambience", "ambiance", "decor", "music", "vibe", "setting",
               "view", "clean", "noisy", "interior"],
    VALUE: ["price", "priced", "pricey", "portion", "worth", "value", "expensive", "cheap",
            "bill", "cost"],
    ACCESSIBILITY: ["parking", "wheelchair", "accessib", "access", "location", "facilit",
                    "restroom", "toilet"],
}

_SENTENCE_SPLIT = re.compile(r"[.!?;\n]+")


def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(keyword) + r"\b")


_IMPACT_PATTERNS = {
    tier: [(keyword, home, _keyword_pattern(keyword)) for keyword, home in keywords.items()]
    for tier, (_, keywords) in IMPACT_TIERS.items()
}
_TOPIC_PATTERNS = {
    component: re.compile(r"\b(?:" + "|".join(re.escape(word) for word in words) + r")")
    for component, words in TOPIC_WORDS.items()
}


def _topics(sentence: str) -> List[str]:
    return [component for component, pattern in _TOPIC_PATTERNS.items() if pattern.search(sentence)]


def keyword_impact_modifiers(texts: Iterable[str]) -> Dict[str, Any]:
    """Local keyword-impact backend.

    Each occurrence of an impact keyword adds its tier weight to the keyword's
    home component if it has one, otherwise to every component the sentence
    talks about, otherwise to food quality. Totals are capped at +/-3.
    """
    totals = {key: 0.0 for key in MODIFIER_KEYS}
    found: Dict[str, List[str]] = {tier: [] for tier in IMPACT_TIERS}

    for text in texts:
        for sentence in _SENTENCE_SPLIT.split(text.lower()):
            if not sentence.strip():
                continue
            topics = _topics(sentence)
            for tier, patterns in _IMPACT_PATTERNS.items():
                impact = IMPACT_TIERS[tier][0]
                for keyword, home, pattern in patterns:
                    occurrences = len(pattern.findall(sentence))
                    if not occurrences:
                        continue
                    found[tier].extend([keyword] * occurrences)
                    targets = [home] if home else (topics or [FOOD_QUALITY])
                    for target in targets:
                        totals[target] += impact * occurrences

    result: Dict[str, Any] = {
        key: round_category(clamp_score(value, -MODIFIER_LIMIT, MODIFIER_LIMIT))
        for key, value in totals.items()
    }
    result["keywordCounts"] = found
    return result


# =============================================================================
# ANALYZER
# =============================================================================

SentimentBackend = Callable[[List[str]], Dict[str, Any]]

MAX_REVIEWS = 20


def review_text(review: Any) -> str:
    """Pull the text out of a review string, dict or object.

    Anything that is not a string comes back as "".
    """
    if isinstance(review, dict):
        text = review.get("text") or review.get("textTranslated")
    elif isinstance(review, str):
        text = review
    else:
        text = getattr(review, "text", None)
    return text if isinstance(text, str) else ""


class SentimentAnalyzer:
    """Turns restaurant reviews into component modifiers.

    Never raises: no usable reviews, or any backend error, yields neutral
    modifiers with ``analyzed=False``.
    """

    def __init__(self, backend: Optional[SentimentBackend] = None, max_reviews: int = MAX_REVIEWS):
        self.backend = backend or keyword_impact_modifiers
        self.max_reviews = max_reviews

    def analyze(self, reviews: Optional[Iterable[Any]]) -> SentimentModifiers:
        texts = [text.strip() for text in map(review_text, reviews or []) if text and text.strip()]
        texts = texts[: self.max_reviews]
        if not texts:
            return SentimentModifiers.neutral()

        try:
            raw = self.backend(texts)
            modifiers = SentimentModifiers.model_validate(raw)
        except Exception as e:
            logger.warning(f"Sentiment analysis failed, using neutral modifiers: {e}")
            return SentimentModifiers.neutral()

        modifiers.analyzed = True
        logger.debug(
            "Sentiment modifiers: food %+.2f, service %+.2f, ambience %+.2f",
            modifiers.food_quality_modifier,
            modifiers.service_modifier,
            modifiers.ambience_modifier,
        )
        return modifiers
