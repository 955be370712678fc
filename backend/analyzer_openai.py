"""OpenAI-powered review sentiment backend.

Asks the model to apply the keyword-impact rules to a batch of reviews and
return per-component modifiers. Falls back to the local keyword rules when no
API key is configured so local development still produces modifiers.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from openai import OpenAI

import settings
from scoring.sentiment import SentimentBackend, keyword_impact_modifiers

logger = logging.getLogger(__name__)

_PROMPT = """Analyze these restaurant reviews and provide sentiment modifiers for each rating category.

Reviews:
{reviews}

Apply these keyword impact rules for EACH review:
- Critical negative keywords (dirty, food poisoning, rude, worst, terrible, awful): -0.8 per occurrence
- Moderate negative keywords (slow service, overpriced, disappointing, mediocre): -0.4 per occurrence
- Minor negative keywords (average, nothing special, okay): -0.2 per occurrence
- Positive keywords (excellent, amazing, highly recommend, delicious, outstanding, perfect): +0.3 per occurrence

Categorize keywords by component:
- Food Quality: Keywords about taste, flavor, ingredients, dishes, menu, cooking
- Service: Keywords about staff, waiters, service speed, attentiveness, friendliness
- Ambience: Keywords about atmosphere, decor, music, vibe, setting, cleanliness
- Value for Money: Keywords about prices, portions, worth it, expensive, cheap
- Accessibility: Keywords about parking, wheelchair access, facilities, location

Sum up the modifiers for each component across all reviews, then cap each modifier between -3.0 and +3.0.

Return ONLY valid JSON in this exact format:
{{
  "foodQualityModifier": <number between -3.0 and +3.0>,
  "serviceModifier": <number between -3.0 and +3.0>,
  "ambienceModifier": <number between -3.0 and +3.0>,
  "valueModifier": <number between -3.0 and +3.0>,
  "accessibilityModifier": <number between -3.0 and +3.0>,
  "keywordCounts": {{
    "criticalNegative": [<array of keywords found>],
    "moderateNegative": [<array of keywords found>],
    "minorNegative": [<array of keywords found>],
    "positive": [<array of keywords found>]
  }}
}}"""

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def build_prompt(texts: List[str]) -> str:
    numbered = "\n\n".join(f"{i + 1}. {text}" for i, text in enumerate(texts))
    return _PROMPT.format(reviews=numbered)


def parse_json_object(blob: str) -> Dict[str, Any]:
    """Pull the JSON object out of a model reply, tolerating Markdown fences."""
    cleaned = _CODE_FENCE.sub("", blob.strip())
    start = cleaned.find("{")
    end = cleaned.rfind("}") + 1
    if start == -1 or end == 0:
        raise ValueError("No JSON object in model response")
    return json.loads(cleaned[start:end])


class OpenAISentimentBackend:
    """Callable backend for ``SentimentAnalyzer``.

    Errors propagate; the analyzer turns them into neutral modifiers.
    """

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        model: str = settings.SENTIMENT_MODEL,
        timeout: float = settings.SENTIMENT_TIMEOUT_SECONDS,
    ):
        self.client = client
        self.model = model
        self.timeout = timeout

    def _get_client(self) -> OpenAI:
        """Get or create OpenAI client."""
        if self.client is None:
            if not settings.OPENAI_API_KEY:
                raise ValueError("OPENAI_API_KEY not set")
            # Bounded request time, no retries: a slow call degrades to neutral
            self.client = OpenAI(
                api_key=settings.OPENAI_API_KEY,
                timeout=self.timeout,
                max_retries=0,
            )
        return self.client

    def __call__(self, texts: List[str]) -> Dict[str, Any]:
        response = self._get_client().chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": build_prompt(texts)}],
            temperature=0,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content or ""
        return parse_json_object(content)


def get_sentiment_backend(provider: Optional[str] = None) -> Optional[SentimentBackend]:
    """Backend for the configured provider.

    Returns None for "none" (skip sentiment analysis entirely).
    """
    preference = (provider or settings.SENTIMENT_PROVIDER or "openai").lower()

    if preference == "none":
        return None

    if preference == "openai":
        if settings.OPENAI_API_KEY:
            return OpenAISentimentBackend()
        logger.warning("OPENAI_API_KEY not set; using keyword rules for sentiment")
        return keyword_impact_modifiers

    if preference == "keyword":
        return keyword_impact_modifiers

    raise ValueError(f"Unknown sentiment provider: {provider}")
