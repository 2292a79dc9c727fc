"""
Platform default acceleration curves.

Pointer drivers carry no "HIDAccelCurves" property by default, but the
keyboard personality of IOHIDEventDriver ships a parametric table that
matches the stock mouse feel. It is read once from the driver's Info.plist;
if that fails for any reason a hand-copied table is used instead.
"""
from __future__ import annotations

import logging
import plistlib
import threading
from typing import Optional, Sequence, Tuple
from xml.parsers.expat import ExpatError

from pointercurve.errors import SystemCurvesUnavailable
from pointercurve.models.system_curve import SystemCurve
from pointercurve.utils.fixed_point import float_to_fixed

log = logging.getLogger(__name__)

DEFAULT_PLIST_PATH = (
    "/System/Library/Extensions/IOHIDFamily.kext/Contents/PlugIns/"
    "IOHIDEventDriver.kext/Contents/Info.plist"
)
CURVES_KEY_PATH: Tuple[str, ...] = ("IOKitPersonalities", "HID Keyboard Driver", "HIDAccelCurves")

# index, linear, parabolic, cubic, quartic, tangent speed linear, tangent speed parabolic root
FALLBACK_CURVES: Tuple[SystemCurve, ...] = (
    SystemCurve(
        float_to_fixed(0.0), float_to_fixed(1.0), float_to_fixed(0.0), float_to_fixed(0.0),
        float_to_fixed(0.0), float_to_fixed(8.0), float_to_fixed(0.0),
    ),
    SystemCurve(8192,   60293, 26214,  5243,  0, 537395, 1245184),
    SystemCurve(32768,  60948, 36045,  6554,  0, 543949, 1179648),
    SystemCurve(45056,  61604, 46531,  7864,  0, 550502, 1114112),
    SystemCurve(57344,  62259, 57672,  9830,  0, 557056, 1048576),
    SystemCurve(65536,  62915, 69468,  11796, 0, 563610, 983040),
    SystemCurve(98304,  63570, 81920,  14418, 0, 570163, 917504),
    SystemCurve(131072, 64225, 95027,  17695, 0, 576717, 851968),
    SystemCurve(163840, 64881, 108790, 21627, 0, 583270, 786432),
    SystemCurve(196608, 65536, 123208, 26214, 0, 589824, 786432),
)


def read_system_curves(
    path: str = DEFAULT_PLIST_PATH,
    key_path: Sequence[str] = CURVES_KEY_PATH,
) -> Tuple[SystemCurve, ...]:
    """Read the curve table from `path`; raises SystemCurvesUnavailable on any failure."""
    try:
        with open(path, "rb") as f:
            plist = plistlib.load(f)
    except (OSError, ValueError, ExpatError) as e:
        # plistlib.InvalidFileException is a ValueError
        raise SystemCurvesUnavailable(f"Cannot read {path}: {e}") from e

    node = plist
    for key in key_path:
        if not isinstance(node, dict) or key not in node:
            raise SystemCurvesUnavailable(f"Key path {'.'.join(key_path)} not found in {path}")
        node = node[key]

    if not isinstance(node, list) or not node:
        raise SystemCurvesUnavailable(
            f"{'.'.join(key_path)} must be a non-empty array, got {type(node).__name__}"
        )

    try:
        return tuple(SystemCurve.from_plist(entry) for entry in node)
    except (TypeError, KeyError) as e:
        raise SystemCurvesUnavailable(f"Malformed curve entry in {path}: {e}") from e


class SystemCurveLoader:
    """
    Lazily reads the platform curves once per loader.

    The first attempt is final: a failed read is cached as the fallback
    table and never retried. Safe to call from several threads.
    """

    def __init__(self, path: str = DEFAULT_PLIST_PATH, key_path: Sequence[str] = CURVES_KEY_PATH):
        self.path = path
        self.key_path = tuple(key_path)
        self.used_fallback = False
        self._curves: Optional[Tuple[SystemCurve, ...]] = None
        self._lock = threading.Lock()

    def curves(self) -> Tuple[SystemCurve, ...]:
        if self._curves is None:
            with self._lock:
                if self._curves is None:
                    self._curves = self._load()
        return self._curves

    def _load(self) -> Tuple[SystemCurve, ...]:
        try:
            curves = read_system_curves(self.path, self.key_path)
        except SystemCurvesUnavailable as e:
            log.warning(
                "[SystemCurves] Failed to load default pointer accel curves (%s). "
                "Falling back to hardcoded curves.", e,
            )
            self.used_fallback = True
            return FALLBACK_CURVES

        log.info("[SystemCurves] Loaded %d default curves from %s", len(curves), self.path)
        return curves


_default_loader: Optional[SystemCurveLoader] = None
_default_lock = threading.Lock()


def default_loader() -> SystemCurveLoader:
    """Process-wide loader for the standard plist location."""
    global _default_loader
    if _default_loader is None:
        with _default_lock:
            if _default_loader is None:
                _default_loader = SystemCurveLoader()
    return _default_loader


def select_curve(curves: Sequence[SystemCurve], scaling: float) -> SystemCurve:
    """
    Pick the control point for the platform acceleration slider value
    `scaling`: the highest index not above it, or the lowest one if
    `scaling` is below every index.
    """
    if not curves:
        raise ValueError("No curves to select from")
    below = [c for c in curves if c.index_value <= scaling]
    if below:
        return max(below, key=lambda c: c.index)
    return min(curves, key=lambda c: c.index)
