"""Load snapshots exported by the health-data collector."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import HealthSnapshot

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be read or is not a JSON object."""


def load_snapshot(path: Path) -> HealthSnapshot:
    """Read a JSON snapshot export from ``path``.

    The file must hold a single JSON object. Individual readings that are
    missing or malformed become None rather than errors.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(payload, dict):
        raise SnapshotError(
            f"Snapshot {path} must be a JSON object, got {type(payload).__name__}"
        )

    snapshot = HealthSnapshot.from_dict(payload)
    logger.debug("Loaded snapshot from %s: %s", path, snapshot)
    return snapshot
