"""Biometric snapshot models and loading."""

from .loader import SnapshotError, load_snapshot
from .models import BiologicalSex, HealthSnapshot

__all__ = [
    "BiologicalSex",
    "HealthSnapshot",
    "SnapshotError",
    "load_snapshot",
]
