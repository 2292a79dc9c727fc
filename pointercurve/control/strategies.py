from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Type

from pointercurve.control.compensation import IDENTITY, CompensationRatios, compensate
from pointercurve.errors import IllConditionedInputError
from pointercurve.models.curve_params import AccelerationCurveParams
from pointercurve.models.semantic import SensitivityTargets
from pointercurve.utils.curve_math import Line, Point, nth_root, polynomial_regression, snap_to_zero

log = logging.getLogger(__name__)


def _check_curvature(curvature: float) -> None:
    if not -1.0 <= curvature <= 1.0:
        raise ValueError(f"Curvature must be within [-1, 1], got {curvature}")


class CurveStrategy(ABC):
    """Maps sensitivity targets → driver acceleration curve coefficients."""

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def from_targets(
        cls,
        targets: SensitivityTargets,
        curvature: float = 1.0,
        smooth_curvature: bool = False,
    ) -> "CurveStrategy":
        ...

    @abstractmethod
    def raw_curve(self) -> AccelerationCurveParams:
        """Coefficients for the reference device, before compensation."""
        ...

    def curve(self, ratios: CompensationRatios = IDENTITY) -> AccelerationCurveParams:
        raw = self.raw_curve()
        log.debug("[%s] raw curve %s", self.__class__.__name__, raw)
        return compensate(raw, ratios)


# 1. Primary strategy: sensitivity at two speeds + curvature knob
class CompleteSensitivityStrategy(CurveStrategy):
    """
    Back-solves a, b, c from the perceived sensitivity s0 at speed v0 and
    s1 at speed v1.

    `curvature` scales c between ±c_max, the strongest curvature that still
    passes through both anchors. With `smooth_curvature` c is instead the
    value that keeps the sensitivity slope continuous at v1.
    """
    name = "complete"

    def __init__(
        self,
        low_speed: float,
        low_sens: float,
        high_speed: float,
        high_sens: float,
        curvature: float = 1.0,
        smooth_curvature: bool = False,
    ) -> None:
        _check_curvature(curvature)
        self.low_speed = low_speed
        self.low_sens = low_sens
        self.high_speed = high_speed
        self.high_sens = high_sens
        self.curvature = curvature
        self.smooth_curvature = smooth_curvature

    @classmethod
    def from_targets(cls, targets, curvature=1.0, smooth_curvature=False):
        return cls(
            targets.low_speed, targets.low_sens,
            targets.high_speed, targets.high_sens,
            curvature=curvature, smooth_curvature=smooth_curvature,
        )

    def raw_curve(self) -> AccelerationCurveParams:
        v0, s0 = self.low_speed, self.low_sens
        v1, s1 = self.high_speed, self.high_sens

        if v0 == v1:
            raise IllConditionedInputError(f"Low and high speed must differ (both {v0})")

        ds = s0 - s1
        dv = v0 - v1

        if self.smooth_curvature:
            denom = v0 ** 2 - 3 * v1 * v0 + 2 * v1 ** 2
            if denom == 0:
                raise IllConditionedInputError(
                    f"Smooth curvature undefined for v0={v0}, v1={v1} (v0 == 2·v1)"
                )
            c = nth_root(ds, 3) / nth_root(denom, 3)
        else:
            c_max = nth_root(ds, 3) / nth_root(v0 ** 2 - 2 * v1 * v0 + v1 ** 2, 3)
            c = self.curvature * c_max

        b = nth_root((ds - c ** 3 * (v0 ** 2 - v1 ** 2)) / dv, 2)
        a = s1 + v1 * (v0 * c ** 3 - ds / dv)

        return AccelerationCurveParams(
            linear_gain=a,
            parabolic_gain=b,
            cubic_gain=c,
            quartic_gain=0.0,
            cap_speed_linear=v1,
            cap_speed_parabolic_root=v1 * 1000,
        )


# 2. Sensitivity as straight as a cubic allows through two anchors
class LinearSensitivityStrategy(CurveStrategy):
    """
    Extrapolates the line through both anchors back to speed 0 (floored at
    sensitivity 0 so the pointer never moves backwards), fits a quadratic
    sensitivity through the three points and lifts it into the driver form.
    """
    name = "linear"

    def __init__(self, low_speed: float, low_sens: float, high_speed: float, high_sens: float) -> None:
        self.low_speed = low_speed
        self.low_sens = low_sens
        self.high_speed = high_speed
        self.high_sens = high_sens

    @classmethod
    def from_targets(cls, targets, curvature=1.0, smooth_curvature=False):
        return cls(targets.low_speed, targets.low_sens, targets.high_speed, targets.high_sens)

    def raw_curve(self) -> AccelerationCurveParams:
        if self.low_speed == 0 or self.high_speed == 0:
            raise IllConditionedInputError("Anchor speeds must be non-zero; speed 0 is extrapolated")

        p2 = Point(self.low_speed, self.low_sens)
        p3 = Point(self.high_speed, self.high_sens)
        e = Line.through(p2, p3).evaluate(0.0)
        p1 = Point(0.0, max(e, 0.0))

        k = polynomial_regression([p1.x, p2.x, p3.x], [p1.y, p2.y, p3.y], 2)
        k = snap_to_zero(k)

        # sens(x) = k0 + k1·x + k2·x²  ⇒  f(x) = k0·x + (√k1·x)² + (∛k2·x)³
        a = k[0]
        b = nth_root(k[1], 2)
        c = nth_root(k[2], 3)

        if c != 0:
            log.warning(
                "[LinearSensitivityStrategy] The generated pointer acceleration curve is "
                "not linear. Coefficients: a: %s, b: %s, c: %s", a, b, c,
            )

        return AccelerationCurveParams(
            linear_gain=a,
            parabolic_gain=b,
            cubic_gain=c,
            quartic_gain=0.0,
            cap_speed_linear=self.high_speed * 100,
            cap_speed_parabolic_root=self.high_speed * 1000,
        )


# 3. Two-slider variant: fixed base sensitivity + slope
class SimpleLinearStrategy(CurveStrategy):
    """
    sens(x) = base_sens + acceleration·x, never capped.
    `acceleration` 0 gives a flat curve.
    """
    name = "simple"

    BASE_SENS: ClassVar[float] = 0.8
    # Set very high so the caps never engage; the driver wants the second one higher
    CAP_SPEED_LINEAR: ClassVar[float] = 9999.0
    CAP_SPEED_PARABOLIC_ROOT: ClassVar[float] = 9999.0 * 100

    def __init__(self, acceleration: float, base_sens: float = BASE_SENS) -> None:
        self.acceleration = acceleration
        self.base_sens = base_sens

    @classmethod
    def from_targets(cls, targets, curvature=1.0, smooth_curvature=False):
        dv = targets.high_speed - targets.low_speed
        if dv == 0:
            raise IllConditionedInputError(
                f"Low and high speed must differ (both {targets.low_speed})"
            )
        slope = (targets.high_sens - targets.low_sens) / dv
        return cls(acceleration=max(slope, 0.0))

    def raw_curve(self) -> AccelerationCurveParams:
        return AccelerationCurveParams(
            linear_gain=self.base_sens,
            parabolic_gain=nth_root(self.acceleration, 2),
            cubic_gain=0.0,
            quartic_gain=0.0,
            cap_speed_linear=self.CAP_SPEED_LINEAR,
            cap_speed_parabolic_root=self.CAP_SPEED_PARABOLIC_ROOT,
        )


# 4. Anchored at speed 0: low_sens is the sensitivity at rest
class CurvatureSensitivityStrategy(CurveStrategy):
    name = "curvature"

    def __init__(self, low_sens: float, high_sens: float, high_speed: float, curvature: float = 1.0) -> None:
        _check_curvature(curvature)
        self.low_sens = low_sens
        self.high_sens = high_sens
        self.high_speed = high_speed
        self.curvature = curvature

    @classmethod
    def from_targets(cls, targets, curvature=1.0, smooth_curvature=False):
        return cls(targets.low_sens, targets.high_sens, targets.high_speed, curvature=curvature)

    def raw_curve(self) -> AccelerationCurveParams:
        v = self.high_speed
        if v <= 0:
            raise IllConditionedInputError(f"High speed must be positive, got {v}")

        a = self.low_sens
        # curvature that keeps the speed slope continuous at the cap
        c_smooth = nth_root(a - self.high_sens, 3) / (2 ** (1 / 3) * v ** (2 / 3))
        c = self.curvature * c_smooth
        b = nth_root(self.high_sens - a - c ** 3 * v ** 2, 2) / math.sqrt(v)

        return AccelerationCurveParams(
            linear_gain=a,
            parabolic_gain=b,
            cubic_gain=c,
            quartic_gain=0.0,
            cap_speed_linear=v,
            cap_speed_parabolic_root=v * 100,
        )


STRATEGIES: Dict[str, Type[CurveStrategy]] = {
    cls.name: cls
    for cls in (
        CompleteSensitivityStrategy,
        LinearSensitivityStrategy,
        SimpleLinearStrategy,
        CurvatureSensitivityStrategy,
    )
}


def strategy_for(name: str) -> Type[CurveStrategy]:
    key = name.strip().lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown curve strategy '{name}'")
    return STRATEGIES[key]
