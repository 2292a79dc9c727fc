import pytest

from pointercurve.errors import CurveDomainError, IllConditionedInputError
from pointercurve.utils.curve_math import Line, Point, nth_root, polynomial_regression, snap_to_zero
from pointercurve.utils.fixed_point import FIXED_ONE, fixed_to_float, float_to_fixed


def test_nth_root_keeps_sign_for_odd_roots():
    assert nth_root(8, 3) == pytest.approx(2.0)
    assert nth_root(-8, 3) == pytest.approx(-2.0)
    assert nth_root(-32, 5) == pytest.approx(-2.0)
    assert nth_root(0.0, 3) == 0.0


def test_nth_root_rejects_even_root_of_negative():
    with pytest.raises(CurveDomainError):
        nth_root(-4, 2)
    assert nth_root(16, 4) == pytest.approx(2.0)


def test_nth_root_rejects_non_positive_order():
    with pytest.raises(ValueError):
        nth_root(4, 0)


def test_quadratic_regression_interpolates_three_points():
    # y = 1 + 2x + 3x^2
    xs = [0.0, 1.0, 2.0]
    ys = [1.0, 6.0, 17.0]
    k = polynomial_regression(xs, ys, 2)

    assert k == pytest.approx([1.0, 2.0, 3.0])


def test_regression_least_squares_line():
    k = polynomial_regression([0, 1, 2, 3], [0.1, 0.9, 2.1, 2.9], 1)
    assert k[1] == pytest.approx(0.96)
    assert k[0] == pytest.approx(0.06)


def test_regression_input_checks():
    with pytest.raises(ValueError):
        polynomial_regression([0, 1, 2], [0, 1], 1)
    with pytest.raises(ValueError):
        polynomial_regression([0, 1], [0, 1], 2)


def test_line_interpolates_and_extrapolates():
    line = Line.through(Point(1.0, 2.0), Point(3.0, 6.0))
    assert line.evaluate(2.0) == pytest.approx(4.0)
    assert line.evaluate(0.0) == pytest.approx(0.0)
    assert line.evaluate(5.0) == pytest.approx(10.0)


def test_vertical_line_is_ill_conditioned():
    with pytest.raises(IllConditionedInputError):
        Line.through(Point(2.0, 1.0), Point(2.0, 5.0))


def test_snap_to_zero_only_removes_noise():
    assert snap_to_zero([1.0, 1e-17, -2e-16]) == [1.0, 0.0, 0.0]
    assert snap_to_zero([1.0, 1e-3]) == [1.0, 1e-3]
    assert snap_to_zero([0.0, 0.0]) == [0.0, 0.0]


def test_fixed_point_conversion():
    assert FIXED_ONE == 65536
    assert float_to_fixed(1.0) == 65536
    assert float_to_fixed(8.0) == 524288
    assert float_to_fixed(0.5) == 32768
    assert fixed_to_float(196608) == 3.0
    assert fixed_to_float(float_to_fixed(0.4)) == pytest.approx(0.4, abs=1 / FIXED_ONE)
