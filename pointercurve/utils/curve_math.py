from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from pointercurve.errors import CurveDomainError, IllConditionedInputError


def nth_root(value: float, n: int) -> float:
    """
    Real n-th root.

    Odd roots of negative values keep the sign (nth_root(-8, 3) == -2).
    Even roots of negative values raise CurveDomainError instead of
    returning nan.
    """
    if n <= 0:
        raise ValueError(f"Root order must be positive, got {n}")
    if value >= 0:
        return value ** (1.0 / n)
    if n % 2 == 0:
        raise CurveDomainError(f"Even root ({n}) of negative value {value}")
    return -((-value) ** (1.0 / n))


def polynomial_regression(xs: Sequence[float], ys: Sequence[float], degree: int) -> list[float]:
    """
    Least-squares polynomial fit.

    Returns the coefficients lowest order first, so the result `k` reads
    as  y = k[0] + k[1]·x + k[2]·x² + …
    """
    if len(xs) != len(ys):
        raise ValueError(f"xs and ys differ in length ({len(xs)} vs {len(ys)})")
    if degree < 0:
        raise ValueError(f"Degree must be non-negative, got {degree}")
    if len(xs) < degree + 1:
        raise ValueError(
            f"Need at least {degree + 1} points for a degree {degree} fit, got {len(xs)}"
        )

    coeffs = np.polynomial.polynomial.polyfit(
        np.asarray(xs, dtype=float), np.asarray(ys, dtype=float), degree
    )
    return [float(k) for k in coeffs]


@dataclass(frozen=True)
class Point:
    """(speed, sensitivity) sample on a sensitivity curve."""
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    slope: float
    intercept: float

    @classmethod
    def through(cls, p: Point, q: Point) -> "Line":
        dx = q.x - p.x
        if dx == 0:
            raise IllConditionedInputError(
                f"Cannot draw a line through two points at the same speed ({p.x})"
            )
        slope = (q.y - p.y) / dx
        return cls(slope=slope, intercept=p.y - slope * p.x)

    def evaluate(self, x: float) -> float:
        return self.slope * x + self.intercept


def is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def snap_to_zero(values: Sequence[float], rel_tol: float = 1e-9) -> list[float]:
    """Replace entries that are numerical noise relative to the largest one with 0.0."""
    scale = max((abs(v) for v in values), default=0.0)
    return [0.0 if abs(v) <= rel_tol * scale else v for v in values]
