"""Wellness scoring and recommendations."""

from .dimensions import (
    activity_score,
    cardiovascular_score,
    demographic_multiplier,
    lifestyle_score,
    metabolic_score,
)
from .recommendations import generate_recommendations
from .score import (
    DEFAULT_WEIGHTS,
    RISK_THRESHOLDS,
    RiskLevel,
    ScoreBreakdown,
    ScoreResult,
    ScoreWeights,
    classify_risk,
    compute_score,
)

__all__ = [
    "DEFAULT_WEIGHTS",
    "RISK_THRESHOLDS",
    "RiskLevel",
    "ScoreBreakdown",
    "ScoreResult",
    "ScoreWeights",
    "activity_score",
    "cardiovascular_score",
    "classify_risk",
    "compute_score",
    "demographic_multiplier",
    "generate_recommendations",
    "lifestyle_score",
    "metabolic_score",
]
