"""
Polling rate and CPI compensation.

The driver uses the raw per-report delta as "speed". At the same physical
speed a device polling twice as fast reports deltas half as big, so:

1. Input deltas are pre-scaled by  sens · pollingRateRatio / cpiRatio
   (`cpi_multiplier`) before they reach the acceleration curve.
2. The curve  f(x) = ax + (bx)² + (cx)³ + (dx)⁴  is divided by the rate
   ratio so the distance integrated over many reports stays the same.
   An order-k gain sits inside a k-th power, hence  gain_k / ratio^(1/k).

The two stages act at different places and are never folded together.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from pointercurve.errors import CurveDomainError, IllConditionedInputError, InfeasibleCurveError
from pointercurve.models.curve_params import AccelerationCurveParams
from pointercurve.utils.curve_math import is_finite

log = logging.getLogger(__name__)

BASE_POLLING_RATE = 125.0
BASE_CPI = 1000.0


def polling_rate_ratio(base_polling_rate: float, actual_polling_rate: float) -> float:
    return actual_polling_rate / base_polling_rate


def cpi_ratio(base_cpi: float, actual_cpi: float) -> float:
    return actual_cpi / base_cpi


@dataclass(frozen=True)
class CompensationRatios:
    """
    Device measurements expressed relative to the reference device.
      polling_rate_ratio  – actual ÷ base polling rate
      cpi_ratio           – actual ÷ base CPI
    """
    polling_rate_ratio: float = 1.0
    cpi_ratio: float = 1.0

    def __post_init__(self) -> None:
        for name in ("polling_rate_ratio", "cpi_ratio"):
            value = getattr(self, name)
            if not is_finite(value) or value <= 0:
                raise IllConditionedInputError(f"{name} must be positive and finite, got {value}")

    @classmethod
    def from_measurements(
        cls,
        actual_polling_rate: float,
        actual_cpi: float,
        base_polling_rate: float = BASE_POLLING_RATE,
        base_cpi: float = BASE_CPI,
    ) -> "CompensationRatios":
        return cls(
            polling_rate_ratio=polling_rate_ratio(base_polling_rate, actual_polling_rate),
            cpi_ratio=cpi_ratio(base_cpi, actual_cpi),
        )


IDENTITY = CompensationRatios()


def cpi_multiplier(ratios: CompensationRatios, sens: float = 1.0) -> float:
    """Factor applied to raw device deltas before the acceleration curve."""
    return sens * ratios.polling_rate_ratio / ratios.cpi_ratio


def validate_curve(curve: AccelerationCurveParams) -> None:
    if not is_finite(*curve.gains()):
        raise CurveDomainError(f"Curve has non-finite gains: {curve.gains()}")
    if curve.linear_gain < 0:
        raise InfeasibleCurveError(
            f"Invalid sensitivity curve. Initial sensitivity is negative (a={curve.linear_gain})"
        )
    caps = (curve.cap_speed_linear, curve.cap_speed_parabolic_root)
    if not is_finite(*caps) or min(caps) <= 0:
        raise CurveDomainError(f"Cap speeds must be positive and finite, got {caps}")


def compensate(curve: AccelerationCurveParams, ratios: CompensationRatios) -> AccelerationCurveParams:
    """Validate `curve` and rescale its gains for the device polling rate."""
    validate_curve(curve)

    r = ratios.polling_rate_ratio
    a, b, c, d = curve.gains()
    result = AccelerationCurveParams(
        linear_gain=a / r,
        parabolic_gain=b / r ** (1 / 2),
        cubic_gain=c / r ** (1 / 3),
        quartic_gain=d / r ** (1 / 4),
        cap_speed_linear=curve.cap_speed_linear,
        cap_speed_parabolic_root=curve.cap_speed_parabolic_root,
    )
    log.debug(
        "[Compensation] ratio=%.3f a:%.6f→%.6f b:%.6f→%.6f c:%.6f→%.6f d:%.6f→%.6f",
        r, a, result.linear_gain, b, result.parabolic_gain,
        c, result.cubic_gain, d, result.quartic_gain,
    )
    return result
