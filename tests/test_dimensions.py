"""Tests for the per-dimension sub-scorers."""

import pytest

from wellscore.health.dimensions import (
    activity_score,
    bmi_from,
    cardiovascular_score,
    data_completeness,
    demographic_multiplier,
    energy_target,
    ideal_weight,
    lifestyle_score,
    metabolic_score,
    weight_deviation,
)
from wellscore.snapshot import BiologicalSex, HealthSnapshot

MALE = BiologicalSex.MALE
FEMALE = BiologicalSex.FEMALE


class TestEmptySnapshot:
    """No readings means no penalties and no bonuses."""

    def test_all_dimensions_perfect(self):
        snap = HealthSnapshot()
        assert cardiovascular_score(snap) == 100
        assert metabolic_score(snap) == 100
        assert activity_score(snap) == 100
        assert lifestyle_score(snap) == 100
        assert demographic_multiplier(snap) == 1.0


class TestCardiovascular:
    @pytest.mark.parametrize(
        "rhr,expected",
        [
            (45, 100),   # athletic bonus, clamped
            (55, 100),
            (58, 100),   # no penalty, no bonus
            (60, 98),
            (65, 98),
            (70, 92),
            (75, 92),
            (80, 85),
            (99, 85),
            (100, 75),
            (110, 75),
        ],
    )
    def test_resting_heart_rate_bands(self, rhr, expected):
        assert cardiovascular_score(HealthSnapshot(resting_heart_rate=rhr)) == expected

    def test_wide_spread_between_current_and_resting(self):
        snap = HealthSnapshot(resting_heart_rate=60, heart_rate=100)
        assert cardiovascular_score(snap) == 88

    def test_spread_penalty_combines_with_bonus(self):
        snap = HealthSnapshot(resting_heart_rate=40, heart_rate=80)
        assert cardiovascular_score(snap) == 95

    def test_spread_of_exactly_30_is_not_penalised(self):
        snap = HealthSnapshot(resting_heart_rate=65, heart_rate=95)
        assert cardiovascular_score(snap) == 98

    def test_heart_rate_alone_is_ignored(self):
        assert cardiovascular_score(HealthSnapshot(heart_rate=150)) == 100

    def test_zero_resting_rate_counts_as_missing(self):
        snap = HealthSnapshot(resting_heart_rate=0, heart_rate=150)
        assert cardiovascular_score(snap) == 100


class TestMetabolic:
    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (17.0, 85),
            (18.5, 100),
            (22.0, 100),
            (24.9, 100),
            (27.0, 85),
            (30.0, 70),
            (32.0, 70),
        ],
    )
    def test_bmi_bands(self, bmi, expected):
        assert metabolic_score(HealthSnapshot(bmi=bmi)) == expected

    def test_bmi_derived_from_weight_and_height(self):
        # 100 kg at 180 cm is BMI ~30.9
        snap = HealthSnapshot(weight=100, height=180)
        assert metabolic_score(snap) == 70

    def test_ideal_weight_exact_match(self):
        snap = HealthSnapshot(weight=72, height=180, age=40, biological_sex=MALE)
        assert metabolic_score(snap) == 100

    def test_moderate_deviation_stacks_with_bmi_penalty(self):
        # BMI ~27.8 (-15), 25% over ideal (-10)
        snap = HealthSnapshot(weight=90, height=180, age=40, biological_sex=MALE)
        assert metabolic_score(snap) == 75

    def test_large_deviation_stacks_with_obesity_penalty(self):
        # BMI ~30.9 (-30), 39% over ideal (-20)
        snap = HealthSnapshot(weight=100, height=180, age=40, biological_sex=MALE)
        assert metabolic_score(snap) == 50

    def test_reported_bmi_just_below_25_earns_no_bonus(self):
        assert metabolic_score(HealthSnapshot(bmi=24.95)) == 100
        # No BMI bonus to hide the -20 deviation penalty
        snap = HealthSnapshot(
            bmi=24.95, weight=100, height=180, age=40, biological_sex=MALE
        )
        assert metabolic_score(snap) == 80

    def test_derived_bmi_just_below_25_earns_bonus(self):
        # 80.9 kg at 180 cm is BMI ~24.97
        snap = HealthSnapshot(weight=80.9, height=180)
        assert metabolic_score(snap) == 100
        snap = HealthSnapshot(weight=80.9, height=180, age=40, biological_sex=FEMALE)
        # ideal 68 kg, 19% over (-10), derived BMI bonus (+10)
        assert metabolic_score(snap) == 100

    def test_reported_bmi_wins_but_deviation_still_applies(self):
        snap = HealthSnapshot(
            bmi=22, weight=100, height=180, age=40, biological_sex=MALE
        )
        assert metabolic_score(snap) == 90

    def test_deviation_needs_age_and_sex(self):
        assert metabolic_score(HealthSnapshot(weight=100, height=180, age=40)) == 70
        assert metabolic_score(
            HealthSnapshot(weight=100, height=180, biological_sex=MALE)
        ) == 70

    def test_zero_ideal_weight_does_not_raise(self):
        snap = HealthSnapshot(weight=50, height=100, age=40, biological_sex=FEMALE)
        # BMI 50 (-30), infinite deviation (-20)
        assert metabolic_score(snap) == 50

    def test_helpers(self):
        assert bmi_from(81, 180) == pytest.approx(25.0)
        assert ideal_weight(180, male=True) == pytest.approx(72.0)
        assert ideal_weight(165, male=False) == pytest.approx(55.25)
        assert weight_deviation(90, 180, male=True) == pytest.approx(0.25)


class TestActivity:
    @pytest.mark.parametrize(
        "steps,expected",
        [
            (0, 60),
            (2000, 60),
            (4000, 75),
            (6000, 90),
            (8000, 100),
            (10000, 100),
            (15000, 100),
        ],
    )
    def test_step_bands(self, steps, expected):
        assert activity_score(HealthSnapshot(step_count=steps)) == expected

    def test_top_step_tier_only_awards_the_10000_bonus(self):
        # +15 from the >=10000 branch; the +20 tier is never reached
        snap = HealthSnapshot(step_count=15000, active_energy_burned=50)
        assert activity_score(snap) == 85

    def test_top_energy_tier_only_awards_the_1_2_bonus(self):
        # ratio ~1.67 still scores +15
        snap = HealthSnapshot(step_count=2000, active_energy_burned=500)
        assert activity_score(snap) == 75

    @pytest.mark.parametrize(
        "energy,expected",
        [
            (0, 70),
            (50, 70),
            (120, 85),
            (300, 100),
        ],
    )
    def test_energy_bands_against_default_target(self, energy, expected):
        assert activity_score(HealthSnapshot(active_energy_burned=energy)) == expected

    def test_energy_target_by_demographics(self):
        assert energy_target(HealthSnapshot()) == 300
        assert energy_target(HealthSnapshot(age=25)) == 300
        assert energy_target(HealthSnapshot(age=25, biological_sex=FEMALE)) == 400
        assert energy_target(HealthSnapshot(age=40, biological_sex=MALE)) == pytest.approx(420)
        assert energy_target(HealthSnapshot(age=60, biological_sex=MALE)) == pytest.approx(300)

    def test_male_target_changes_ratio(self):
        # 100 / 420 is below 0.3
        snap = HealthSnapshot(active_energy_burned=100, age=40, biological_sex=MALE)
        assert activity_score(snap) == 70


class TestLifestyle:
    @pytest.mark.parametrize(
        "age,expected",
        [
            (20, 95),
            (30, 100),
            (40, 100),
            (55, 92),
            (70, 85),
        ],
    )
    def test_age_bands(self, age, expected):
        assert lifestyle_score(HealthSnapshot(age=age)) == expected

    def test_male_penalty(self):
        assert lifestyle_score(HealthSnapshot(biological_sex=MALE)) == 95
        assert lifestyle_score(HealthSnapshot(biological_sex=FEMALE)) == 100

    def test_completeness_bonus(self):
        snap = HealthSnapshot(
            step_count=8000,
            heart_rate=70,
            weight=70,
            height=175,
            resting_heart_rate=60,
            age=70,
        )
        assert data_completeness(snap) == pytest.approx(5 / 6)
        assert lifestyle_score(snap) == 95

    def test_partial_data_gets_no_bonus(self):
        snap = HealthSnapshot(
            step_count=8000, heart_rate=70, weight=70, height=175, age=70
        )
        assert data_completeness(snap) == pytest.approx(4 / 6)
        assert lifestyle_score(snap) == 85

    def test_zero_readings_do_not_count(self):
        snap = HealthSnapshot(step_count=0, active_energy_burned=0)
        assert data_completeness(snap) == 0


class TestDemographicMultiplier:
    @pytest.mark.parametrize(
        "age,expected",
        [
            (None, 1.0),
            (20, 1.0),
            (30, 0.95),
            (49, 0.95),
            (50, 0.90),
            (65, 0.85),
            (90, 0.85),
        ],
    )
    def test_age_bands(self, age, expected):
        assert demographic_multiplier(HealthSnapshot(age=age)) == expected
