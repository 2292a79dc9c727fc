import math

import pytest

from pointercurve.control.compensation import (
    IDENTITY,
    CompensationRatios,
    compensate,
    cpi_multiplier,
    cpi_ratio,
    polling_rate_ratio,
    validate_curve,
)
from pointercurve.errors import CurveDomainError, IllConditionedInputError, InfeasibleCurveError
from pointercurve.models.curve_params import AccelerationCurveParams


CURVE = AccelerationCurveParams(1.2, 2.0, -0.6, 0.3, 8.0, 8000.0)


def test_ratios():
    assert polling_rate_ratio(125, 500) == 4.0
    assert cpi_ratio(1000, 1600) == 1.6

    ratios = CompensationRatios.from_measurements(actual_polling_rate=1000, actual_cpi=800)
    assert ratios.polling_rate_ratio == 8.0
    assert ratios.cpi_ratio == 0.8


def test_ratios_use_explicit_baselines():
    ratios = CompensationRatios.from_measurements(
        actual_polling_rate=1000, actual_cpi=1600, base_polling_rate=500, base_cpi=800
    )
    assert ratios == CompensationRatios(2.0, 2.0)


def test_cpi_multiplier():
    assert cpi_multiplier(IDENTITY) == 1.0
    assert cpi_multiplier(CompensationRatios(2.0, 1.0)) == 2.0
    assert cpi_multiplier(CompensationRatios(2.0, 2.0)) == 1.0
    assert cpi_multiplier(CompensationRatios(4.0, 1.0), sens=0.5) == 2.0


def test_unit_ratio_leaves_curve_unchanged():
    assert compensate(CURVE, IDENTITY) == CURVE


def test_double_polling_rate_scales_each_order():
    out = compensate(CURVE, CompensationRatios(polling_rate_ratio=2.0))

    assert out.linear_gain == pytest.approx(CURVE.linear_gain / 2)
    assert out.parabolic_gain == pytest.approx(CURVE.parabolic_gain / math.sqrt(2))
    assert out.cubic_gain == pytest.approx(CURVE.cubic_gain / 2 ** (1 / 3))
    assert out.quartic_gain == pytest.approx(CURVE.quartic_gain / 2 ** (1 / 4))
    assert out.cap_speed_linear == CURVE.cap_speed_linear
    assert out.cap_speed_parabolic_root == CURVE.cap_speed_parabolic_root


def test_cpi_ratio_does_not_touch_coefficients():
    assert compensate(CURVE, CompensationRatios(1.0, 3.0)) == CURVE


def test_negative_linear_gain_is_rejected_not_clamped():
    with pytest.raises(InfeasibleCurveError):
        compensate(AccelerationCurveParams(-0.1, 1.0, 0.0, 0.0, 8.0, 8000.0), IDENTITY)


def test_non_finite_or_bad_caps_rejected():
    with pytest.raises(CurveDomainError):
        validate_curve(AccelerationCurveParams(1.0, float("nan"), 0.0, 0.0, 8.0, 8000.0))
    with pytest.raises(CurveDomainError):
        validate_curve(AccelerationCurveParams(1.0, 1.0, 0.0, 0.0, 0.0, 8000.0))
    with pytest.raises(CurveDomainError):
        validate_curve(AccelerationCurveParams(1.0, 1.0, 0.0, 0.0, 8.0, float("inf")))


def test_curve_helpers():
    flat = AccelerationCurveParams(2.0, 0.0, 0.0, 0.0, 8.0, 8000.0)
    assert flat.evaluate(3.0) == 6.0
    assert flat.sensitivity(0.0) == 2.0
    assert flat.sensitivity(5.0) == 2.0

    curved = AccelerationCurveParams(1.0, 1.0, 0.0, 0.0, 8.0, 8000.0)
    assert curved.evaluate(2.0) == 6.0
    assert curved.sensitivity(2.0) == 3.0


@pytest.mark.parametrize("rate", [0.0, -125.0, float("nan"), float("inf")])
def test_bad_polling_rate_is_ill_conditioned(rate):
    with pytest.raises(IllConditionedInputError):
        CompensationRatios.from_measurements(actual_polling_rate=rate, actual_cpi=1000)


@pytest.mark.parametrize("cpi", [0.0, -800.0])
def test_bad_cpi_is_ill_conditioned(cpi):
    with pytest.raises(IllConditionedInputError):
        CompensationRatios.from_measurements(actual_polling_rate=125, actual_cpi=cpi)


def test_ratios_are_checked_when_built_directly():
    with pytest.raises(IllConditionedInputError):
        CompensationRatios(polling_rate_ratio=-1.0)
    with pytest.raises(IllConditionedInputError):
        CompensationRatios(cpi_ratio=0.0)
