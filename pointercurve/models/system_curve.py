from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from pointercurve.models.curve_params import AccelerationCurveParams
from pointercurve.utils.fixed_point import fixed_to_float

KEY_INDEX = "HIDAccelIndex"
KEY_GAIN_LINEAR = "HIDAccelGainLinear"
KEY_GAIN_PARABOLIC = "HIDAccelGainParabolic"
KEY_GAIN_CUBIC = "HIDAccelGainCubic"
KEY_GAIN_QUARTIC = "HIDAccelGainQuartic"
KEY_TANGENT_SPEED_LINEAR = "HIDAccelTangentSpeedLinear"
KEY_TANGENT_SPEED_PARABOLIC_ROOT = "HIDAccelTangentSpeedParabolicRoot"

# Gain keys that the driver treats as 0 when absent
_OPTIONAL_KEYS = (KEY_GAIN_PARABOLIC, KEY_GAIN_CUBIC, KEY_GAIN_QUARTIC)


@dataclass(frozen=True)
class SystemCurve:
    """One control point of the platform acceleration table; every field is 16.16 fixed point."""
    index: int
    linear_gain: int
    parabolic_gain: int
    cubic_gain: int
    quartic_gain: int
    tangent_speed_linear: int
    tangent_speed_parabolic_root: int

    @classmethod
    def from_plist(cls, entry: Mapping[str, Any]) -> "SystemCurve":
        """
        Build from one dictionary of the `HIDAccelCurves` array.
        Raises TypeError / KeyError for malformed entries.
        """
        if not isinstance(entry, Mapping):
            raise TypeError(f"Curve entry must be a dictionary, got {type(entry).__name__}")

        def field(key: str) -> int:
            if key not in entry and key in _OPTIONAL_KEYS:
                return 0
            value = entry[key]
            # bool is an int subclass but never a valid fixed-point value
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{key} must be an integer, got {type(value).__name__}")
            return value

        return cls(
            index=field(KEY_INDEX),
            linear_gain=field(KEY_GAIN_LINEAR),
            parabolic_gain=field(KEY_GAIN_PARABOLIC),
            cubic_gain=field(KEY_GAIN_CUBIC),
            quartic_gain=field(KEY_GAIN_QUARTIC),
            tangent_speed_linear=field(KEY_TANGENT_SPEED_LINEAR),
            tangent_speed_parabolic_root=field(KEY_TANGENT_SPEED_PARABOLIC_ROOT),
        )

    def to_plist(self) -> Dict[str, int]:
        return {
            KEY_INDEX: self.index,
            KEY_GAIN_LINEAR: self.linear_gain,
            KEY_GAIN_PARABOLIC: self.parabolic_gain,
            KEY_GAIN_CUBIC: self.cubic_gain,
            KEY_GAIN_QUARTIC: self.quartic_gain,
            KEY_TANGENT_SPEED_LINEAR: self.tangent_speed_linear,
            KEY_TANGENT_SPEED_PARABOLIC_ROOT: self.tangent_speed_parabolic_root,
        }

    @property
    def index_value(self) -> float:
        return fixed_to_float(self.index)

    def decoded(self) -> Tuple[float, ...]:
        """All seven fields as floats, in declaration order."""
        return (
            fixed_to_float(self.index),
            fixed_to_float(self.linear_gain),
            fixed_to_float(self.parabolic_gain),
            fixed_to_float(self.cubic_gain),
            fixed_to_float(self.quartic_gain),
            fixed_to_float(self.tangent_speed_linear),
            fixed_to_float(self.tangent_speed_parabolic_root),
        )

    def to_params(self) -> AccelerationCurveParams:
        """
        Decoded gains and tangent speeds. Table rows are driver data, not
        synthesized curves: row 0 has a zero parabolic-root tangent speed and
        would not pass `validate_curve`.
        """
        _, a, b, c, d, cap_linear, cap_parabolic = self.decoded()
        return AccelerationCurveParams(a, b, c, d, cap_linear, cap_parabolic)
