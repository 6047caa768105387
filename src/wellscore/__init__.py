"""WellScore - Wellness score and health-risk tiers from biometric readings."""

from wellscore.health import RiskLevel, ScoreBreakdown, ScoreResult, ScoreWeights, compute_score
from wellscore.snapshot import BiologicalSex, HealthSnapshot, load_snapshot
from wellscore.themes import color_for_score, label_for_risk_level, metric_status

__version__ = "0.1.0"

__all__ = [
    "BiologicalSex",
    "HealthSnapshot",
    "RiskLevel",
    "ScoreBreakdown",
    "ScoreResult",
    "ScoreWeights",
    "color_for_score",
    "compute_score",
    "label_for_risk_level",
    "load_snapshot",
    "metric_status",
]
