"""Per-dimension sub-scorers.

Each scorer starts from 100, applies fixed adjustments for the readings that
are present, and clamps the result to 0-100. Scores stay unrounded here; the
aggregator in :mod:`wellscore.health.score` rounds them for display.

A reading counts as present when it is not None and non-zero, except for
``step_count`` and ``active_energy_burned`` where a zero reading is a real
(and penalised) day of inactivity.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wellscore.snapshot import HealthSnapshot


def clamp(score: float, low: float = 0.0, high: float = 100.0) -> float:
    """Bound a score to [low, high]."""
    return max(low, min(high, score))


def _known(value: float | None) -> bool:
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return value != 0


# =============================================================================
# Cardiovascular
# =============================================================================

# Resting heart rate penalties, first match wins
RESTING_HR_PENALTIES = (
    (100, 25),
    (80, 15),
    (70, 8),
    (60, 2),
)
ATHLETIC_RESTING_HR = (40, 55)
ATHLETIC_BONUS = 5
HR_VARIABILITY_LIMIT = 30
HR_VARIABILITY_PENALTY = 10


def cardiovascular_score(snapshot: "HealthSnapshot") -> float:
    """Score resting heart rate and its spread against the current reading.

    Blood pressure is not collected yet and contributes nothing.
    """
    score = 100.0
    rhr = snapshot.resting_heart_rate

    if _known(rhr):
        for threshold, penalty in RESTING_HR_PENALTIES:
            if rhr >= threshold:
                score -= penalty
                break
        # Stacks with the penalty-free 55-60 zone
        low, high = ATHLETIC_RESTING_HR
        if low <= rhr <= high:
            score += ATHLETIC_BONUS

    if _known(snapshot.heart_rate) and _known(rhr):
        variability = abs(snapshot.heart_rate - rhr)
        if variability > HR_VARIABILITY_LIMIT:
            score -= HR_VARIABILITY_PENALTY

    return clamp(score)


# =============================================================================
# Metabolic
# =============================================================================

def bmi_from(weight: float, height_cm: float) -> float:
    """Body-mass index from kilograms and centimetres."""
    height_m = height_cm / 100
    return weight / (height_m * height_m)


def _bmi_adjustment(bmi: float, reported: bool = False) -> int:
    """BMI band adjustment.

    A reported BMI only earns the bonus inside 18.5-24.9, so values in the
    gap below 25 score nothing. A BMI derived from weight and height earns
    it for anything not penalised.
    """
    if bmi < 18.5:
        return -15
    elif bmi >= 30:
        return -30
    elif bmi >= 25:
        return -15
    elif reported and not 18.5 <= bmi <= 24.9:
        return 0
    return 10


def ideal_weight(height_cm: float, male: bool) -> float:
    """Broca ideal weight, 0.9 factor for men and 0.85 otherwise."""
    factor = 0.9 if male else 0.85
    return (height_cm / 100 - 1) * 100 * factor


def weight_deviation(weight: float, height_cm: float, male: bool) -> float:
    """Relative distance of ``weight`` from the ideal weight.

    A zero ideal weight (height of exactly 100 cm) yields infinity.
    """
    ideal = ideal_weight(height_cm, male)
    if ideal == 0:
        return math.inf
    return abs(weight - ideal) / ideal


def metabolic_score(snapshot: "HealthSnapshot") -> float:
    """Score BMI and distance from ideal weight.

    The two adjustments are independent and both may apply.
    """
    score = 100.0
    weight, height = snapshot.weight, snapshot.height

    if _known(snapshot.bmi):
        score += _bmi_adjustment(snapshot.bmi, reported=True)
    elif _known(weight) and _known(height):
        score += _bmi_adjustment(bmi_from(weight, height))

    if (
        _known(weight)
        and _known(height)
        and _known(snapshot.age)
        and snapshot.biological_sex is not None
    ):
        deviation = weight_deviation(weight, height, snapshot.is_male)
        if deviation > 0.3:
            score -= 20
        elif deviation > 0.15:
            score -= 10

    return clamp(score)


# =============================================================================
# Activity
# =============================================================================

DEFAULT_ENERGY_TARGET = 300
MALE_ENERGY_FACTOR = 1.2


def energy_target(snapshot: "HealthSnapshot") -> float:
    """Daily active-energy target in kcal for the snapshot's demographics."""
    if not (_known(snapshot.age) and snapshot.biological_sex is not None):
        return DEFAULT_ENERGY_TARGET

    if snapshot.age < 30:
        target = 400
    elif snapshot.age < 50:
        target = 350
    else:
        target = 250

    if snapshot.is_male:
        target *= MALE_ENERGY_FACTOR
    return target


def activity_score(snapshot: "HealthSnapshot") -> float:
    """Score daily steps and active energy burned against target.

    Both chains are first-match, so the >=12000 step and >=1.5 ratio tiers
    are never reached: the >=10000 and >=1.2 branches catch those values
    first. Existing scores depend on this ordering.
    """
    score = 100.0

    steps = snapshot.step_count
    if steps is not None:
        if steps < 3000:
            score -= 40
        elif steps < 5000:
            score -= 25
        elif steps < 7000:
            score -= 10
        elif steps >= 10000:
            score += 15
        elif steps >= 12000:
            score += 20

    energy = snapshot.active_energy_burned
    if energy is not None:
        ratio = energy / energy_target(snapshot)
        if ratio < 0.3:
            score -= 30
        elif ratio < 0.6:
            score -= 15
        elif ratio >= 1.2:
            score += 15
        elif ratio >= 1.5:
            score += 20

    return clamp(score)


# =============================================================================
# Lifestyle
# =============================================================================

COMPLETENESS_THRESHOLD = 0.8
COMPLETENESS_BONUS = 10


def data_completeness(snapshot: "HealthSnapshot") -> float:
    """Fraction of monitored readings that are present and positive."""
    readings = snapshot.monitored_readings
    present = sum(1 for r in readings if r is not None and r > 0)
    return present / len(readings)


def lifestyle_score(snapshot: "HealthSnapshot") -> float:
    """Score age band, sex and how actively the user monitors their health."""
    score = 100.0

    age = snapshot.age
    if _known(age):
        if age >= 65:
            score -= 15
        elif age >= 50:
            score -= 8
        elif age < 25:
            score -= 5

    if snapshot.is_male:
        score -= 5

    if data_completeness(snapshot) >= COMPLETENESS_THRESHOLD:
        score += COMPLETENESS_BONUS

    return clamp(score)


# =============================================================================
# Demographic adjustment
# =============================================================================

AGE_MULTIPLIERS = (
    (65, 0.85),
    (50, 0.90),
    (30, 0.95),
)


def demographic_multiplier(snapshot: "HealthSnapshot") -> float:
    """Age-based multiplier applied to the weighted aggregate."""
    if not _known(snapshot.age):
        return 1.0
    for min_age, multiplier in AGE_MULTIPLIERS:
        if snapshot.age >= min_age:
            return multiplier
    return 1.0
