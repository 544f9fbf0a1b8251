"""Volunteer matching and workload tracking."""
from .models import CrisisCase, MatchFactors, MatchResult, MatchingStats, VolunteerRecord
from .volunteer_matcher import MAX_LOAD, MIN_MATCH_SCORE, VolunteerMatcher

__all__ = [
    "CrisisCase",
    "MatchFactors",
    "MatchResult",
    "MatchingStats",
    "VolunteerRecord",
    "VolunteerMatcher",
    "MAX_LOAD",
    "MIN_MATCH_SCORE",
]
