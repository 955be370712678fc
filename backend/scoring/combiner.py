"""Weighted combination of component scores into one overall score."""

from typing import Mapping

from .numeric import clamp_score, round_category, round_restaurant


def combine(components: Mapping[str, float], weights: Mapping[str, float]) -> float:
    """Weighted sum of the components named in ``weights`` (unrounded).

    A component missing from ``components`` is a programming error and
    raises KeyError.
    """
    return sum(components[name] * weight for name, weight in weights.items())


def combine_restaurant(components: Mapping[str, float], weights: Mapping[str, float]) -> float:
    return round_restaurant(clamp_score(combine(components, weights)))


def combine_category(components: Mapping[str, float], weights: Mapping[str, float]) -> float:
    return round_category(clamp_score(combine(components, weights)))
