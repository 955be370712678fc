"""Environment configuration for the rating jobs."""

import os

from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SECRET_KEY = os.getenv("SUPABASE_SECRET_KEY")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
SENTIMENT_PROVIDER = os.getenv("SENTIMENT_PROVIDER", "openai")
SENTIMENT_MODEL = os.getenv("SENTIMENT_MODEL", "gpt-4o-mini")
SENTIMENT_TIMEOUT_SECONDS = float(os.getenv("SENTIMENT_TIMEOUT_SECONDS", "20"))

# Pause between entities in batch runs (external API rate limits)
RATING_BATCH_DELAY = float(os.getenv("RATING_BATCH_DELAY", "2.0"))
