"""Presentation helpers and configurable status themes for wellscore.

The fixed helpers (``color_for_score``, ``label_for_risk_level`` and
``metric_status``) are what display layers consume. Themes only change how the
CLI names and colors the four risk tiers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from wellscore.health.score import RiskLevel, classify_risk


# =============================================================================
# Score colors and risk labels
# =============================================================================

SCORE_COLORS = {
    RiskLevel.LOW: "#10B981",        # green
    RiskLevel.MODERATE: "#F59E0B",   # amber
    RiskLevel.HIGH: "#EF4444",       # red
    RiskLevel.VERY_HIGH: "#DC2626",  # dark red
}

RISK_LABELS = {
    RiskLevel.LOW: "Low risk",
    RiskLevel.MODERATE: "Moderate risk",
    RiskLevel.HIGH: "High risk",
    RiskLevel.VERY_HIGH: "Very high risk",
}

UNKNOWN_LABEL = "Unknown"


def _bucket(score: float) -> RiskLevel:
    """Risk tier for any number, clamping out-of-range scores first."""
    if math.isnan(score):
        return RiskLevel.VERY_HIGH
    return classify_risk(max(0, min(100, score)))


def color_for_score(score: float) -> str:
    """Hex color for a 0-100 score, bucketed like the risk tiers."""
    return SCORE_COLORS[_bucket(score)]


def label_for_risk_level(level: RiskLevel | str) -> str:
    """Human-readable description of a risk tier."""
    try:
        return RISK_LABELS[RiskLevel(level)]
    except (ValueError, TypeError):
        return UNKNOWN_LABEL


# =============================================================================
# Per-reading status
# =============================================================================

class MetricStatus(str, Enum):
    """Status of a single reading, shown next to the raw value."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"


METRIC_STATUS_LABELS = {
    MetricStatus.EXCELLENT: "Excellent",
    MetricStatus.GOOD: "Good",
    MetricStatus.FAIR: "Fair",
    MetricStatus.POOR: "Needs improvement",
    MetricStatus.UNKNOWN: "No data",
}

# Ideal ranges shown alongside each reading
METRIC_HINTS = {
    "resting_heart_rate": "Ideal range: 40-60 bpm",
    "bmi": "Ideal range: 18.5-24.9",
    "step_count": "Suggested goal: 10,000 steps/day",
    "active_energy_burned": "Active energy burned today",
}


def metric_status(value: float | None, metric: str) -> MetricStatus:
    """Classify one reading. Unknown metrics and missing values are UNKNOWN."""
    if value is None:
        return MetricStatus.UNKNOWN

    if metric == "resting_heart_rate":
        if value <= 60:
            return MetricStatus.EXCELLENT
        if value <= 70:
            return MetricStatus.GOOD
        if value <= 80:
            return MetricStatus.FAIR
        return MetricStatus.POOR

    if metric == "bmi":
        if 18.5 <= value <= 24.9:
            return MetricStatus.EXCELLENT
        if 25 <= value <= 29.9:
            return MetricStatus.FAIR
        return MetricStatus.POOR

    if metric == "step_count":
        if value >= 10000:
            return MetricStatus.EXCELLENT
        if value >= 7000:
            return MetricStatus.GOOD
        if value >= 5000:
            return MetricStatus.FAIR
        return MetricStatus.POOR

    if metric == "active_energy_burned":
        if value >= 400:
            return MetricStatus.EXCELLENT
        if value >= 300:
            return MetricStatus.GOOD
        if value >= 200:
            return MetricStatus.FAIR
        return MetricStatus.POOR

    return MetricStatus.UNKNOWN


# =============================================================================
# CLI themes
# =============================================================================

@dataclass(frozen=True)
class StatusTheme:
    """A theme defining risk labels, emojis, and terminal colors.

    Each theme has 4 levels from best to worst, matching the risk tiers:
    - level_0: low
    - level_1: moderate
    - level_2: high
    - level_3: very-high
    """

    name: str
    level_0: str
    level_1: str
    level_2: str
    level_3: str

    emoji_0: str = "✅"
    emoji_1: str = "⚠️"
    emoji_2: str = "🟠"
    emoji_3: str = "🔴"

    color_0: str = "green"
    color_1: str = "yellow"
    color_2: str = "bright_red"
    color_3: str = "red"

    @property
    def labels(self) -> tuple[str, str, str, str]:
        """Return all labels as a tuple (best to worst)."""
        return (self.level_0, self.level_1, self.level_2, self.level_3)

    def _index(self, level: RiskLevel) -> int:
        return list(RiskLevel).index(level)

    def label_for(self, level: RiskLevel) -> str:
        return self.labels[self._index(level)]

    def emoji_for(self, level: RiskLevel) -> str:
        return (self.emoji_0, self.emoji_1, self.emoji_2, self.emoji_3)[self._index(level)]

    def color_for(self, level: RiskLevel) -> str:
        """Click color name for a risk tier."""
        return (self.color_0, self.color_1, self.color_2, self.color_3)[self._index(level)]

    def color_for_score(self, score: float) -> str:
        """Click color name for a 0-100 score."""
        return self.color_for(_bucket(score))


# =============================================================================
# Predefined Themes
# =============================================================================

THEME_CLINICAL = StatusTheme(
    name="clinical",
    level_0="low risk",
    level_1="moderate risk",
    level_2="high risk",
    level_3="very high risk",
)

THEME_TRAFFIC = StatusTheme(
    name="traffic",
    level_0="green",
    level_1="yellow",
    level_2="orange",
    level_3="red",
    emoji_0="🟢",
    emoji_1="🟡",
    emoji_2="🟠",
    emoji_3="🔴",
)

THEME_MEDICAL = StatusTheme(
    name="medical",
    level_0="stable",
    level_1="guarded",
    level_2="serious",
    level_3="critical",
    emoji_0="💚",
    emoji_1="💛",
    emoji_2="🧡",
    emoji_3="💔",
)

THEME_FITNESS = StatusTheme(
    name="fitness",
    level_0="thriving",
    level_1="steady",
    level_2="slipping",
    level_3="struggling",
    emoji_0="💪",
    emoji_1="🏃",
    emoji_2="🚶",
    emoji_3="🛋️",
)

THEME_PLAIN = StatusTheme(
    name="plain",
    level_0="low",
    level_1="moderate",
    level_2="high",
    level_3="very-high",
    emoji_0="+",
    emoji_1="~",
    emoji_2="!",
    emoji_3="x",
    color_0="bright_green",
    color_1="yellow",
    color_2="bright_yellow",
    color_3="bright_red",
)


# =============================================================================
# Theme Registry
# =============================================================================

THEMES: dict[str, StatusTheme] = {
    "clinical": THEME_CLINICAL,
    "traffic": THEME_TRAFFIC,
    "medical": THEME_MEDICAL,
    "fitness": THEME_FITNESS,
    "plain": THEME_PLAIN,
}

DEFAULT_THEME = "clinical"

# Module-level current theme (can be changed at runtime)
_current_theme: str = DEFAULT_THEME


def get_theme(name: str | None = None) -> StatusTheme:
    """Get a theme by name, or the current theme if name is None."""
    if name is None:
        name = _current_theme
    return THEMES.get(name, THEMES[DEFAULT_THEME])


def set_theme(name: str) -> None:
    """Set the current theme by name."""
    global _current_theme
    if name not in THEMES:
        raise ValueError(f"Unknown theme: {name}. Available: {list(THEMES.keys())}")
    _current_theme = name


def get_current_theme_name() -> str:
    """Get the name of the current theme."""
    return _current_theme


def list_themes() -> list[str]:
    """List all available theme names."""
    return list(THEMES.keys())
