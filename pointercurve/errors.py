class CurveError(ValueError):
    """A requested curve cannot be synthesized from the given inputs."""


class InfeasibleCurveError(CurveError):
    """The sensitivity targets force a negative linear gain."""


class IllConditionedInputError(CurveError):
    """Inputs collapse a denominator to zero (e.g. equal anchor speeds)."""


class CurveDomainError(CurveError):
    """A coefficient left the real domain (even root of a negative, inf, nan)."""


class SystemCurvesUnavailable(Exception):
    """The platform default curves could not be read."""
