"""
Review Theme Analysis
=====================
Counts recurring topics in customer reviews (parking, pricing, service...),
splits them into praises and concerns by star rating, and suggests FAQ
questions for the topics people keep bringing up.
"""

import logging
import re
from typing import Any, Dict, List, Literal, Tuple

from pydantic import BaseModel, Field

from .sentiment import review_text

logger = logging.getLogger(__name__)

THEME_KEYWORDS: Dict[str, List[str]] = {
    "parking": ["parking", "valet", "parked", "lot", "garage", "space", "street parking"],
    "wait_time": ["wait", "queue", "crowded", "busy", "quick", "fast service", "slow service"],
    "pricing": ["expensive", "cheap", "price", "cost", "overpriced", "pricey", "affordable", "value"],
    "dress_code": ["dress code", "formal", "casual", "attire", "outfit"],
    "reservations": ["reservation", "booking", "reserved", "walk-in", "appointment"],
    "dietary": ["vegan", "vegetarian", "gluten", "halal", "kosher", "keto", "allergy", "dairy-free"],
    "menu": ["menu", "dish", "food quality", "taste", "flavour", "portion"],
    "service": ["service", "staff", "waiter", "friendly", "rude", "attentive", "slow"],
    "atmosphere": ["ambiance", "atmosphere", "decor", "noisy", "romantic", "family-friendly"],
    "delivery": ["delivery", "takeaway", "takeout", "online order"],
    "hours": ["open", "closed", "hours", "timing", "early", "late night"],
    "payment": ["payment", "card", "cash", "credit", "accept", "methods"],
}

QUESTION_TEMPLATES: Dict[str, List[str]] = {
    "parking": ["Is parking available at the restaurant?", "Do you offer valet parking?"],
    "wait_time": ["How long is the typical wait time?", "Is it better to make a reservation?"],
    "pricing": ["What is the average price per person?", "Is the restaurant expensive?"],
    "dress_code": ["Is there a dress code?", "What should I wear?"],
    "reservations": ["Do you accept reservations?", "Can I walk in without booking?"],
    "dietary": ["Do you have vegetarian/vegan options?", "Can you accommodate dietary restrictions?"],
    "menu": ["What are your signature dishes?", "How often is the menu updated?"],
    "service": ["What is the service like?", "Is the staff friendly and attentive?"],
    "atmosphere": ["What is the atmosphere like?", "Is it suitable for families/couples?"],
    "delivery": ["Do you offer delivery or takeaway?", "Can I order online?"],
    "hours": ["What are your opening hours?", "Are you open on weekends?"],
    "payment": ["What payment methods do you accept?", "Is cash only or do you accept cards?"],
}

DEFAULT_STARS = 3
MAX_QUOTES = 2
QUOTE_LENGTH = 100
TOP_N = 3
FAQ_MIN_MENTIONS = 2

Sentiment = Literal["positive", "negative", "neutral"]


class ReviewTheme(BaseModel):
    topic: str
    category: str
    mention_count: int = 0
    sentiment: Sentiment = "neutral"
    sample_quotes: List[str] = Field(default_factory=list)
    relevance_score: int = Field(0, ge=0, le=100)


class ReviewAnalysisResult(BaseModel):
    themes: List[ReviewTheme] = Field(default_factory=list)
    top_concerns: List[ReviewTheme] = Field(default_factory=list)
    top_praises: List[ReviewTheme] = Field(default_factory=list)
    common_questions: List[str] = Field(default_factory=list)
    summary: str = ""


class FAQSuggestion(BaseModel):
    question: str
    category: str
    relevance_score: int


def star_sentiment(stars: Any) -> Sentiment:
    # A missing or zero rating counts as a middling review
    rating = stars if isinstance(stars, (int, float)) and stars else DEFAULT_STARS
    if rating >= 4:
        return "positive"
    if rating <= 2:
        return "negative"
    return "neutral"


def _review_stars(review: Any) -> Any:
    if isinstance(review, dict):
        return review.get("stars", review.get("rating"))
    return getattr(review, "stars", None)


def analyze_reviews(reviews: List[Any]) -> ReviewAnalysisResult:
    """Extract themes from reviews.

    A theme keeps the sentiment of the first review that mentioned it.
    """
    logger.info(f"Analyzing {len(reviews)} reviews for themes...")
    themes: Dict[str, ReviewTheme] = {}

    for review in reviews:
        text = review_text(review).lower()
        if not text:
            continue
        sentiment = star_sentiment(_review_stars(review))
        sentences = re.split(r"[.!?]", text)

        for category, keywords in THEME_KEYWORDS.items():
            for keyword in keywords:
                if keyword not in text:
                    continue
                key = f"{category}:{keyword}"
                theme = themes.get(key)
                if theme is None:
                    theme = themes[key] = ReviewTheme(
                        topic=keyword, category=category, sentiment=sentiment
                    )
                theme.mention_count += 1

                quote = next((s for s in sentences if keyword in s), None)
                if quote and len(theme.sample_quotes) < MAX_QUOTES:
                    theme.sample_quotes.append(quote.strip()[:QUOTE_LENGTH])

    ranked = sorted(themes.values(), key=lambda t: t.mention_count, reverse=True)
    for theme in ranked:
        theme.relevance_score = min(100, theme.mention_count * 10)

    top_concerns = [t for t in ranked if t.sentiment == "negative"][:TOP_N]
    top_praises = [t for t in ranked if t.sentiment == "positive"][:TOP_N]

    summary = (
        f"Analyzed {len(reviews)} reviews. Found {len(ranked)} unique themes. "
        f"Top concern: {top_concerns[0].topic if top_concerns else 'none'}. "
        f"Top praise: {top_praises[0].topic if top_praises else 'none'}."
    )
    logger.info(f"Analysis complete: {summary}")

    return ReviewAnalysisResult(
        themes=ranked,
        top_concerns=top_concerns,
        top_praises=top_praises,
        common_questions=questions_from_themes(ranked),
        summary=summary,
    )


def question_themes(themes: List[ReviewTheme]) -> List[Tuple[str, ReviewTheme]]:
    """Top FAQ questions, each with the theme that raised it (one per category)."""
    pairs: List[Tuple[str, ReviewTheme]] = []
    asked = set()
    for theme in themes:
        templates = QUESTION_TEMPLATES.get(theme.category)
        if not templates or theme.mention_count < FAQ_MIN_MENTIONS or templates[0] in asked:
            continue
        asked.add(templates[0])
        pairs.append((templates[0], theme))
    return pairs[:TOP_N]


def questions_from_themes(themes: List[ReviewTheme]) -> List[str]:
    return [question for question, _ in question_themes(themes)]


def faq_suggestions(reviews: List[Any]) -> List[FAQSuggestion]:
    analysis = analyze_reviews(reviews)
    return [
        FAQSuggestion(question=question, category=theme.category, relevance_score=theme.relevance_score)
        for question, theme in question_themes(analysis.themes)
    ]
