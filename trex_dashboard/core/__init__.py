"""Aggregation and recommendation engine"""

from .engine import AggregationResult, LandscapeEngine, ResultRow
from .recommend import Recommendation, RecommendationResult, RecommendationStatus
from .store import RecordStore

__all__ = [
    'AggregationResult',
    'LandscapeEngine',
    'ResultRow',
    'Recommendation',
    'RecommendationResult',
    'RecommendationStatus',
    'RecordStore',
]
