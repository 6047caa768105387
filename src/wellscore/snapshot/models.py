"""Data models for biometric snapshots."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping


class BiologicalSex(Enum):
    """Biological sex as reported by the health-data provider."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> BiologicalSex | None:
        """Map a provider value to a member, or None when unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# camelCase keys used by mobile health providers -> dataclass field names
_CAMEL_KEYS = {
    "stepCount": "step_count",
    "heartRate": "heart_rate",
    "restingHeartRate": "resting_heart_rate",
    "activeEnergyBurned": "active_energy_burned",
    "biologicalSex": "biological_sex",
}


def _as_number(value: Any) -> float | None:
    # bool is an int subclass but never a reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return _to_float(value)


def _to_float(value: float | int) -> float:
    """Convert a reading to float; ints beyond float range become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


@dataclass(frozen=True)
class HealthSnapshot:
    """One immutable bundle of biometric readings for a point in time.

    Units are metric: cm, kg, bpm, kcal. Every field is optional; a missing
    reading only skips the contribution of that signal.
    """

    step_count: float | None = None
    heart_rate: float | None = None
    resting_heart_rate: float | None = None
    weight: float | None = None          # kg
    height: float | None = None          # cm
    bmi: float | None = None
    active_energy_burned: float | None = None  # kcal
    age: float | None = None
    biological_sex: BiologicalSex | None = None

    def __post_init__(self) -> None:
        # Readings are stored as floats so scoring never meets an int too
        # large for float arithmetic.
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, int) and not isinstance(value, bool):
                object.__setattr__(self, f.name, _to_float(value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HealthSnapshot:
        """Build a snapshot from a provider payload.

        Accepts camelCase or snake_case keys. Unknown keys are ignored and
        values of the wrong type become None.
        """
        names = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in names:
                continue
            if name == "biological_sex":
                values[name] = BiologicalSex.parse(value)
            else:
                values[name] = _as_number(value)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, BiologicalSex):
                value = value.value
            result[f.name] = value
        return result

    @property
    def is_male(self) -> bool:
        return self.biological_sex == BiologicalSex.MALE

    @property
    def monitored_readings(self) -> list[float | None]:
        """Readings that count towards data completeness."""
        return [
            self.step_count,
            self.heart_rate,
            self.weight,
            self.height,
            self.resting_heart_rate,
            self.active_energy_burned,
        ]
