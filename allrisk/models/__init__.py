"""
API request / response schemas.
"""
from .classification import (
    TherapyResponse,
    OutcomeResponse,
    PathwayRequest,
    MarkerRecordInput,
    ClassificationRequest,
    RecommendationResponse,
    ClassificationResponse,
    HealthResponse,
)

__all__ = [
    "TherapyResponse",
    "OutcomeResponse",
    "PathwayRequest",
    "MarkerRecordInput",
    "ClassificationRequest",
    "RecommendationResponse",
    "ClassificationResponse",
    "HealthResponse",
]
