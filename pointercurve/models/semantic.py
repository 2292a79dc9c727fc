from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class SemanticSensitivity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    TEST = "test"


class SemanticAcceleration(Enum):
    OFF = "off"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    TEST = "test"


@dataclass(frozen=True)
class SensitivityTargets:
    """
    Perceived sensitivity at two input speeds.
      low_speed / low_sens    – slow swipe anchor
      high_speed / high_sens  – fast swipe anchor
    """
    low_speed: float
    low_sens: float
    high_speed: float
    high_sens: float


LOW_SPEED = 0.3
HIGH_SPEED = 8.0

LOW_SENS: Dict[SemanticSensitivity, float] = {
    SemanticSensitivity.LOW:    0.8,
    SemanticSensitivity.MEDIUM: 1.2,
    SemanticSensitivity.HIGH:   2.0,
    SemanticSensitivity.TEST:   2.3,
}

# OFF has no entry: it is a flat curve derived from the sensitivity level
HIGH_SENS: Dict[SemanticAcceleration, float] = {
    SemanticAcceleration.LOW:    3.5,
    SemanticAcceleration.MEDIUM: 8.0,
    SemanticAcceleration.HIGH:   11.0,
    SemanticAcceleration.TEST:   18.0,
}


def parse_sensitivity(value) -> SemanticSensitivity:
    if isinstance(value, SemanticSensitivity):
        return value
    try:
        return SemanticSensitivity(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown sensitivity level '{value}'") from None


def parse_acceleration(value) -> SemanticAcceleration:
    if isinstance(value, SemanticAcceleration):
        return value
    try:
        return SemanticAcceleration(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown acceleration level '{value}'") from None


def sensitivity_targets(
    sensitivity: SemanticSensitivity,
    acceleration: SemanticAcceleration,
    low_speed: float = LOW_SPEED,
    high_speed: float = HIGH_SPEED,
) -> SensitivityTargets:
    """Map a pair of semantic levels to concrete curve anchors."""
    low_sens = LOW_SENS[sensitivity]

    if acceleration is SemanticAcceleration.OFF:
        flat = low_sens * 2
        return SensitivityTargets(low_speed, flat, high_speed, flat)

    return SensitivityTargets(low_speed, low_sens, high_speed, HIGH_SENS[acceleration])


def override_targets(
    targets: SensitivityTargets,
    low_speed: Optional[float] = None,
    low_sens: Optional[float] = None,
    high_speed: Optional[float] = None,
    high_sens: Optional[float] = None,
) -> SensitivityTargets:
    """Advanced mode: explicit numbers replace the semantic level's values."""
    return SensitivityTargets(
        low_speed=targets.low_speed if low_speed is None else low_speed,
        low_sens=targets.low_sens if low_sens is None else low_sens,
        high_speed=targets.high_speed if high_speed is None else high_speed,
        high_sens=targets.high_sens if high_sens is None else high_sens,
    )
