"""Advice strings derived from a score breakdown."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wellscore.health.score import ScoreBreakdown
    from wellscore.snapshot import HealthSnapshot


# Dimensions scoring below this get advice
ADVICE_THRESHOLD = 70
MAX_RECOMMENDATIONS = 4

LOWER_RESTING_HR = "🏃 Add aerobic exercise to bring your resting heart rate down"
MONITOR_CARDIO = "❤️ Check your blood pressure and heart rate regularly"
MANAGE_WEIGHT = "⚖️ Work towards a healthy weight and BMI"
BALANCED_DIET = "🥗 Eat a balanced diet and cut back on processed food"
MORE_STEPS = "🚶 Walk more every day, aiming for 10,000 steps"
STRENGTH_TRAINING = "💪 Add strength training 2-3 times a week"
SLEEP_WELL = "😴 Get 7-9 hours of sleep each night"
MANAGE_STRESS = "🧘 Learn a few stress management techniques"
KEEP_IT_UP = "🌟 Keep up your healthy lifestyle!"
KEEP_MONITORING = "📊 Keep tracking your health metrics regularly"


def generate_recommendations(
    snapshot: "HealthSnapshot",
    breakdown: "ScoreBreakdown",
) -> list[str]:
    """Build up to four recommendations for the weakest dimensions.

    Advice is emitted in dimension order (cardiovascular, metabolic,
    activity, lifestyle). When no dimension is below the threshold the user
    gets two generic encouragements instead.
    """
    recommendations: list[str] = []

    if breakdown.cardiovascular < ADVICE_THRESHOLD:
        rhr = snapshot.resting_heart_rate
        if rhr is not None and rhr > 80:
            recommendations.append(LOWER_RESTING_HR)
        recommendations.append(MONITOR_CARDIO)

    if breakdown.metabolic < ADVICE_THRESHOLD:
        if snapshot.bmi is not None and snapshot.bmi > 25:
            recommendations.append(MANAGE_WEIGHT)
        recommendations.append(BALANCED_DIET)

    if breakdown.activity < ADVICE_THRESHOLD:
        if snapshot.step_count is not None and snapshot.step_count < 7000:
            recommendations.append(MORE_STEPS)
        recommendations.append(STRENGTH_TRAINING)

    if breakdown.lifestyle < ADVICE_THRESHOLD:
        recommendations.append(SLEEP_WELL)
        recommendations.append(MANAGE_STRESS)

    if not recommendations:
        recommendations.append(KEEP_IT_UP)
        recommendations.append(KEEP_MONITORING)

    return recommendations[:MAX_RECOMMENDATIONS]
