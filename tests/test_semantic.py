import pytest

from pointercurve.models.semantic import (
    SemanticAcceleration,
    SemanticSensitivity,
    SensitivityTargets,
    override_targets,
    parse_acceleration,
    parse_sensitivity,
    sensitivity_targets,
)


@pytest.mark.parametrize(
    "sens, accel, low, high",
    [
        (SemanticSensitivity.TEST, SemanticAcceleration.TEST, 2.3, 18.0),
        (SemanticSensitivity.LOW, SemanticAcceleration.LOW, 0.8, 3.5),
        (SemanticSensitivity.MEDIUM, SemanticAcceleration.MEDIUM, 1.2, 8.0),
        (SemanticSensitivity.HIGH, SemanticAcceleration.HIGH, 2.0, 11.0),
    ],
)
def test_levels_map_to_targets(sens, accel, low, high):
    assert sensitivity_targets(sens, accel) == SensitivityTargets(0.3, low, 8.0, high)


def test_acceleration_off_is_flat_and_doubled():
    targets = sensitivity_targets(SemanticSensitivity.MEDIUM, SemanticAcceleration.OFF)
    assert targets.low_sens == 2.4
    assert targets.high_sens == 2.4


def test_targets_do_not_leak_between_calls():
    sensitivity_targets(SemanticSensitivity.LOW, SemanticAcceleration.OFF)
    targets = sensitivity_targets(SemanticSensitivity.LOW, SemanticAcceleration.HIGH)
    assert targets.low_sens == 0.8


def test_parse_levels():
    assert parse_sensitivity(" High ") is SemanticSensitivity.HIGH
    assert parse_acceleration("off") is SemanticAcceleration.OFF
    assert parse_acceleration(SemanticAcceleration.LOW) is SemanticAcceleration.LOW
    with pytest.raises(ValueError):
        parse_sensitivity("off")
    with pytest.raises(ValueError):
        parse_acceleration("ludicrous")


def test_override_targets():
    base = SensitivityTargets(0.3, 2.3, 8.0, 18.0)
    assert override_targets(base) == base
    assert override_targets(base, low_sens=1.0, high_speed=6.0) == SensitivityTargets(0.3, 1.0, 6.0, 18.0)
