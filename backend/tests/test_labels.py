import pytest

from models import ScoreLabel
from scoring import score_label


@pytest.mark.parametrize(
    "score,label",
    [
        (10.0, ScoreLabel.EXCEPTIONAL),
        (9.0, ScoreLabel.EXCEPTIONAL),
        (8.95, ScoreLabel.EXCELLENT),
        (8.0, ScoreLabel.EXCELLENT),
        (7.0, ScoreLabel.VERY_GOOD),
        (6.5, ScoreLabel.GOOD),
        (5.0, ScoreLabel.AVERAGE),
        (4.99, ScoreLabel.BELOW_AVERAGE),
        (0.0, ScoreLabel.BELOW_AVERAGE),
    ],
)
def test_score_bands(score, label):
    assert score_label(score) == label


def test_label_values():
    assert ScoreLabel.VERY_GOOD.value == "Very Good"
    assert ScoreLabel.BELOW_AVERAGE.value == "Below Average"
