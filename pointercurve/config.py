"""
Pointer settings from the environment (and an optional .env file).

Set LOG_LEVEL=DEBUG to see coefficients before and after compensation.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import dotenv

from pointercurve.control.compensation import BASE_CPI, BASE_POLLING_RATE, CompensationRatios
from pointercurve.models.semantic import (
    SemanticAcceleration,
    SemanticSensitivity,
    parse_acceleration,
    parse_sensitivity,
)
from pointercurve.services.system_curves import DEFAULT_PLIST_PATH

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_bool(env: Mapping[str, str], name: str, default: str = "false") -> bool:
    return env.get(name, default).lower() in ("1", "true", "yes", "on")


def _env_float(env: Mapping[str, str], name: str, default: Optional[float]) -> Optional[float]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'") from None


@dataclass(frozen=True)
class PointerSettings:
    sensitivity: SemanticSensitivity = SemanticSensitivity.TEST
    acceleration: SemanticAcceleration = SemanticAcceleration.TEST
    strategy: str = "complete"
    curvature: float = 1.0
    smooth_curvature: bool = False

    # advanced mode overrides, None = take from the semantic level
    low_speed: Optional[float] = None
    high_speed: Optional[float] = None
    low_sens: Optional[float] = None
    high_sens: Optional[float] = None

    polling_rate: float = BASE_POLLING_RATE
    cpi: float = BASE_CPI
    base_polling_rate: float = BASE_POLLING_RATE
    base_cpi: float = BASE_CPI
    sens_multiplier: float = 1.0

    use_system_speed: bool = False
    system_scaling: float = 1.0
    system_curves_plist: str = DEFAULT_PLIST_PATH

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, load_dotenv: bool = True) -> "PointerSettings":
        if env is None:
            if load_dotenv:
                dotenv.load_dotenv()
            env = os.environ

        return cls(
            sensitivity=parse_sensitivity(env.get("POINTER_SENSITIVITY", "test")),
            acceleration=parse_acceleration(env.get("POINTER_ACCELERATION", "test")),
            strategy=env.get("POINTER_CURVE_STRATEGY", "complete").strip().lower(),
            curvature=_env_float(env, "POINTER_CURVATURE", 1.0),
            smooth_curvature=_env_bool(env, "POINTER_SMOOTH_CURVATURE"),
            low_speed=_env_float(env, "POINTER_LOW_SPEED", None),
            high_speed=_env_float(env, "POINTER_HIGH_SPEED", None),
            low_sens=_env_float(env, "POINTER_LOW_SENS", None),
            high_sens=_env_float(env, "POINTER_HIGH_SENS", None),
            polling_rate=_env_float(env, "POINTER_POLLING_RATE", BASE_POLLING_RATE),
            cpi=_env_float(env, "POINTER_CPI", BASE_CPI),
            base_polling_rate=_env_float(env, "POINTER_BASE_POLLING_RATE", BASE_POLLING_RATE),
            base_cpi=_env_float(env, "POINTER_BASE_CPI", BASE_CPI),
            sens_multiplier=_env_float(env, "POINTER_SENS_MULTIPLIER", 1.0),
            use_system_speed=_env_bool(env, "POINTER_USE_SYSTEM_SPEED"),
            system_scaling=_env_float(env, "POINTER_SYSTEM_SCALING", 1.0),
            system_curves_plist=env.get("POINTER_SYSTEM_CURVES_PLIST", DEFAULT_PLIST_PATH),
        )

    def ratios(self) -> CompensationRatios:
        return CompensationRatios.from_measurements(
            actual_polling_rate=self.polling_rate,
            actual_cpi=self.cpi,
            base_polling_rate=self.base_polling_rate,
            base_cpi=self.base_cpi,
        )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
    )
