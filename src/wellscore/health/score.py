"""Wellness score calculation from a biometric snapshot."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .dimensions import (
    activity_score,
    cardiovascular_score,
    clamp,
    demographic_multiplier,
    lifestyle_score,
    metabolic_score,
)
from .recommendations import generate_recommendations

if TYPE_CHECKING:
    from wellscore.snapshot import HealthSnapshot

logger = logging.getLogger(__name__)


class RiskLevel(str, Enum):
    """Risk tier derived from the rounded overall score."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


# Minimum overall score for each tier, best to worst
RISK_THRESHOLDS = {
    RiskLevel.LOW: 85,
    RiskLevel.MODERATE: 70,
    RiskLevel.HIGH: 50,
}


@dataclass(frozen=True)
class ScoreWeights:
    """Weights for blending the four dimensions (must sum to 1.0)."""

    cardiovascular: float = 0.35
    metabolic: float = 0.25
    activity: float = 0.25
    lifestyle: float = 0.15

    def __post_init__(self) -> None:
        values = self.as_dict()
        negative = [name for name, w in values.items() if w < 0]
        if negative:
            raise ValueError(f"Weights must be non-negative: {negative}")
        total = sum(values.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Weights must sum to 1.0, got {total:.4f}")

    def as_dict(self) -> dict[str, float]:
        return {
            "cardiovascular": self.cardiovascular,
            "metabolic": self.metabolic,
            "activity": self.activity,
            "lifestyle": self.lifestyle,
        }


DEFAULT_WEIGHTS = ScoreWeights()


@dataclass(frozen=True)
class ScoreBreakdown:
    """Rounded 0-100 score for each dimension."""

    cardiovascular: int
    metabolic: int
    activity: int
    lifestyle: int

    def to_dict(self) -> dict[str, int]:
        return {
            "cardiovascular": self.cardiovascular,
            "metabolic": self.metabolic,
            "activity": self.activity,
            "lifestyle": self.lifestyle,
        }


@dataclass(frozen=True)
class ScoreResult:
    """Complete wellness score with dimension breakdown and advice."""

    overall: int  # 0-100
    breakdown: ScoreBreakdown
    risk_level: RiskLevel
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "overall": self.overall,
            "breakdown": self.breakdown.to_dict(),
            "risk_level": self.risk_level.value,
            "recommendations": list(self.recommendations),
        }


def round_score(score: float) -> int:
    """Round half up, so 84.5 becomes 85 rather than banker's 84."""
    return int(math.floor(score + 0.5))


def classify_risk(overall: int) -> RiskLevel:
    """Map a rounded overall score to its risk tier."""
    for level, minimum in RISK_THRESHOLDS.items():
        if overall >= minimum:
            return level
    return RiskLevel.VERY_HIGH


def compute_score(
    snapshot: "HealthSnapshot",
    weights: ScoreWeights | None = None,
) -> ScoreResult:
    """
    Calculate the wellness score for a snapshot.

    Args:
        snapshot: Biometric readings; any field may be missing
        weights: Optional dimension weights, defaults to DEFAULT_WEIGHTS

    Returns:
        ScoreResult with overall score, breakdown, risk tier and advice
    """
    if weights is None:
        weights = DEFAULT_WEIGHTS

    cardiovascular = cardiovascular_score(snapshot)
    metabolic = metabolic_score(snapshot)
    activity = activity_score(snapshot)
    lifestyle = lifestyle_score(snapshot)

    # Weighted on the unrounded sub-scores
    weighted = (
        cardiovascular * weights.cardiovascular
        + metabolic * weights.metabolic
        + activity * weights.activity
        + lifestyle * weights.lifestyle
    )
    multiplier = demographic_multiplier(snapshot)
    overall = round_score(clamp(weighted * multiplier))

    breakdown = ScoreBreakdown(
        cardiovascular=round_score(cardiovascular),
        metabolic=round_score(metabolic),
        activity=round_score(activity),
        lifestyle=round_score(lifestyle),
    )
    risk_level = classify_risk(overall)

    logger.debug(
        "Scored snapshot: weighted=%.2f multiplier=%.2f overall=%d risk=%s breakdown=%s",
        weighted,
        multiplier,
        overall,
        risk_level.value,
        breakdown.to_dict(),
    )

    return ScoreResult(
        overall=overall,
        breakdown=breakdown,
        risk_level=risk_level,
        recommendations=tuple(generate_recommendations(snapshot, breakdown)),
    )
