from abc import ABC, abstractmethod
from typing import Sequence

from pointercurve.models.curve_params import AccelerationCurveParams
from pointercurve.models.system_curve import SystemCurve


class BaseDriverAdapter(ABC):
    """Base abstract class for pointer driver adapters"""

    @abstractmethod
    def apply_curve(self, params: AccelerationCurveParams, cpi_multiplier: float):
        """Write a custom parametric curve and the input multiplier to the driver"""
        pass

    @abstractmethod
    def apply_system_curves(self, curves: Sequence[SystemCurve], cpi_multiplier: float):
        """Write the platform default curve table to the driver"""
        pass
