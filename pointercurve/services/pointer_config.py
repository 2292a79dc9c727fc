from __future__ import annotations

import logging
from typing import Optional, Tuple

from pointercurve.config import PointerSettings
from pointercurve.control.compensation import CompensationRatios, cpi_multiplier
from pointercurve.control.strategies import CurveStrategy, strategy_for
from pointercurve.models.curve_params import AccelerationCurveParams
from pointercurve.models.semantic import SensitivityTargets, override_targets, sensitivity_targets
from pointercurve.models.system_curve import SystemCurve
from pointercurve.protocols.base_driver_adapter import BaseDriverAdapter
from pointercurve.services.system_curves import (
    DEFAULT_PLIST_PATH,
    SystemCurveLoader,
    default_loader,
    select_curve,
)

log = logging.getLogger(__name__)


class PointerConfig:
    """Turns pointer settings + device measurements into what the driver needs."""

    def __init__(
        self,
        settings: Optional[PointerSettings] = None,
        ratios: Optional[CompensationRatios] = None,
        system_curves: Optional[SystemCurveLoader] = None,
    ):
        self.settings = settings if settings is not None else PointerSettings()
        # Measured ratios from a device monitor win over the configured rates
        self.ratios = ratios if ratios is not None else self.settings.ratios()

        if system_curves is None:
            if self.settings.system_curves_plist == DEFAULT_PLIST_PATH:
                system_curves = default_loader()
            else:
                system_curves = SystemCurveLoader(self.settings.system_curves_plist)
        self._system_curves = system_curves

    # ----- sensitivity ----------------------------------------------------
    @property
    def cpi_multiplier(self) -> float:
        return cpi_multiplier(self.ratios, self.settings.sens_multiplier)

    # ----- custom curve ---------------------------------------------------
    @property
    def targets(self) -> SensitivityTargets:
        s = self.settings
        base = sensitivity_targets(s.sensitivity, s.acceleration)
        return override_targets(
            base,
            low_speed=s.low_speed,
            low_sens=s.low_sens,
            high_speed=s.high_speed,
            high_sens=s.high_sens,
        )

    @property
    def strategy(self) -> CurveStrategy:
        cls = strategy_for(self.settings.strategy)
        return cls.from_targets(
            self.targets,
            curvature=self.settings.curvature,
            smooth_curvature=self.settings.smooth_curvature,
        )

    @property
    def custom_accel_curve(self) -> AccelerationCurveParams:
        """Raises a CurveError subclass when the settings cannot be met."""
        return self.strategy.curve(self.ratios)

    # ----- system curves --------------------------------------------------
    @property
    def use_system_speed(self) -> bool:
        return self.settings.use_system_speed

    @property
    def system_accel_curves(self) -> Tuple[SystemCurve, ...]:
        return self._system_curves.curves()

    @property
    def system_accel_curve(self) -> SystemCurve:
        return select_curve(self.system_accel_curves, self.settings.system_scaling)

    # ----- driver ---------------------------------------------------------
    def apply(self, driver: BaseDriverAdapter) -> None:
        multiplier = self.cpi_multiplier
        if self.use_system_speed:
            log.info("[PointerConfig] Applying system curves, multiplier=%.4f", multiplier)
            driver.apply_system_curves(self.system_accel_curves, multiplier)
            return

        curve = self.custom_accel_curve
        log.info(
            "[PointerConfig] Applying %s curve a=%.6f b=%.6f c=%.6f d=%.6f, multiplier=%.4f",
            self.settings.strategy,
            curve.linear_gain,
            curve.parabolic_gain,
            curve.cubic_gain,
            curve.quartic_gain,
            multiplier,
        )
        driver.apply_curve(curve, multiplier)
