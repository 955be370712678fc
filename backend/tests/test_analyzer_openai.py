from types import SimpleNamespace

import pytest

import analyzer_openai
from analyzer_openai import OpenAISentimentBackend, get_sentiment_backend, parse_json_object
from scoring import SentimentAnalyzer, keyword_impact_modifiers


class FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(content):
    completions = FakeCompletions(content)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_parse_fenced_json():
    blob = '```json\n{"foodQualityModifier": 1.2, "serviceModifier": -0.4}\n```'
    assert parse_json_object(blob) == {"foodQualityModifier": 1.2, "serviceModifier": -0.4}


def test_parse_json_with_chatter():
    blob = 'Here you go: {"valueModifier": 0.3} hope that helps'
    assert parse_json_object(blob) == {"valueModifier": 0.3}


def test_parse_without_json():
    with pytest.raises(ValueError):
        parse_json_object("I cannot help with that")


def test_backend_sends_numbered_reviews():
    client, completions = fake_client('{"foodQualityModifier": 0.6, "keywordCounts": {"positive": ["delicious"]}}')
    backend = OpenAISentimentBackend(client=client, model="test-model")

    raw = backend(["Delicious pasta", "Slow service"])

    assert raw["foodQualityModifier"] == 0.6
    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["temperature"] == 0
    prompt = call["messages"][0]["content"]
    assert "1. Delicious pasta" in prompt
    assert "2. Slow service" in prompt


def test_analyzer_with_openai_backend():
    client, _ = fake_client('{"foodQualityModifier": 5, "serviceModifier": "n/a"}')
    analyzer = SentimentAnalyzer(OpenAISentimentBackend(client=client))

    modifiers = analyzer.analyze(["Best meal ever"])

    assert modifiers.analyzed is True
    assert modifiers.food_quality_modifier == 3.0
    assert modifiers.service_modifier == 0.0


def test_analyzer_neutral_on_bad_reply():
    client, _ = fake_client("Sorry, no JSON today")
    analyzer = SentimentAnalyzer(OpenAISentimentBackend(client=client))

    modifiers = analyzer.analyze(["Great food"])

    assert modifiers.analyzed is False
    assert modifiers.food_quality_modifier == 0.0


def test_missing_key_fails_on_call(monkeypatch):
    monkeypatch.setattr(analyzer_openai.settings, "OPENAI_API_KEY", None)
    with pytest.raises(ValueError):
        OpenAISentimentBackend()(["text"])


class TestGetSentimentBackend:
    def test_none(self):
        assert get_sentiment_backend("none") is None

    def test_keyword(self):
        assert get_sentiment_backend("keyword") is keyword_impact_modifiers

    def test_openai_with_key(self, monkeypatch):
        monkeypatch.setattr(analyzer_openai.settings, "OPENAI_API_KEY", "sk-test")
        assert isinstance(get_sentiment_backend("openai"), OpenAISentimentBackend)

    def test_openai_without_key_falls_back(self, monkeypatch):
        monkeypatch.setattr(analyzer_openai.settings, "OPENAI_API_KEY", None)
        assert get_sentiment_backend("OpenAI") is keyword_impact_modifiers

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_sentiment_backend("gemini")
