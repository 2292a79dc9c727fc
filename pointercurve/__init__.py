from pointercurve.control.compensation import CompensationRatios, compensate, cpi_multiplier
from pointercurve.control.strategies import (
    STRATEGIES,
    CompleteSensitivityStrategy,
    CurvatureSensitivityStrategy,
    CurveStrategy,
    LinearSensitivityStrategy,
    SimpleLinearStrategy,
    strategy_for,
)
from pointercurve.errors import (
    CurveDomainError,
    CurveError,
    IllConditionedInputError,
    InfeasibleCurveError,
)
from pointercurve.models.curve_params import AccelerationCurveParams
from pointercurve.models.semantic import SemanticAcceleration, SemanticSensitivity
from pointercurve.services.system_curves import FALLBACK_CURVES, SystemCurveLoader

__version__ = "0.1.0"
