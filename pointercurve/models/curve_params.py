from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AccelerationCurveParams:
    """
    Driver-native parametric acceleration curve

        f(x) = a·x + (b·x)² + (c·x)³ + (d·x)⁴

    clipped beyond the two cap speeds.
      linear_gain               – a
      parabolic_gain            – b
      cubic_gain                – c
      quartic_gain              – d
      cap_speed_linear          – speed where the linear segment tangent starts
      cap_speed_parabolic_root  – speed where the parabolic segment tangent starts
    """
    linear_gain: float
    parabolic_gain: float
    cubic_gain: float
    quartic_gain: float
    cap_speed_linear: float
    cap_speed_parabolic_root: float

    def gains(self) -> Tuple[float, float, float, float]:
        return (self.linear_gain, self.parabolic_gain, self.cubic_gain, self.quartic_gain)

    def evaluate(self, speed: float) -> float:
        """Output speed for input `speed`, ignoring the caps."""
        a, b, c, d = self.gains()
        x = speed
        return a * x + (b * x) ** 2 + (c * x) ** 3 + (d * x) ** 4

    def sensitivity(self, speed: float) -> float:
        """Perceived sensitivity f(x)/x; at 0 this is the linear gain."""
        if speed == 0:
            return self.linear_gain
        return self.evaluate(speed) / speed
