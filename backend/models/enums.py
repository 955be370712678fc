"""Enumeration types for the BOK score engine."""

from enum import Enum


class EntityType(str, Enum):
    RESTAURANT = "restaurant"
    HOTEL = "hotel"
    ATTRACTION = "attraction"
    MALL = "mall"
    SCHOOL = "school"
    FITNESS = "fitness"


class ReviewSourceType(str, Enum):
    GOOGLE = "google"
    TRIPADVISOR = "tripadvisor"
    OPENTABLE = "opentable"
    MANUAL = "manual"
    AI_ANALYSIS = "ai_analysis"


class ScoreLabel(str, Enum):
    EXCEPTIONAL = "Exceptional"
    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    AVERAGE = "Average"
    BELOW_AVERAGE = "Below Average"
