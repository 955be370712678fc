"""Restaurant score bands."""

from models import ScoreLabel

# (lower bound inclusive, label), highest first
SCORE_BANDS = [
    (9.0, ScoreLabel.EXCEPTIONAL),
    (8.0, ScoreLabel.EXCELLENT),
    (7.0, ScoreLabel.VERY_GOOD),
    (6.0, ScoreLabel.GOOD),
    (5.0, ScoreLabel.AVERAGE),
]


def score_label(score: float) -> ScoreLabel:
    """9.0+ Exceptional, 8.0+ Excellent, 7.0+ Very Good, 6.0+ Good, 5.0+ Average."""
    for threshold, label in SCORE_BANDS:
        if score >= threshold:
            return label
    return ScoreLabel.BELOW_AVERAGE
