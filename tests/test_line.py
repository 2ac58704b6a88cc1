import math

import numpy as np
import pytest

from geomkit import (
    DegenerateInput,
    InfiniteSolutions,
    InvalidLine,
    Line2D,
    Line3D,
    NoSolution,
    WrongDimension,
    intersect_2d_lines,
    intersect_3d_lines,
    vector2d,
    vector3d,
)


class TestLine2D:
    def test_init(self) -> None:
        l = Line2D(2, -1)
        assert l.slope == 2
        assert l.intercept == -1
        assert l.direction == vector2d(1, 2)

    @pytest.mark.parametrize("slope, intercept", [(math.inf, 0), (0, -math.inf), (math.nan, 0), (0, math.nan)])
    def test_not_finite(self, slope: float, intercept: float) -> None:
        with pytest.raises(InvalidLine):
            Line2D(slope, intercept)

    def test_not_a_number(self) -> None:
        with pytest.raises(InvalidLine):
            Line2D("1", 0)  # type: ignore[arg-type]

    def test_from_points(self) -> None:
        l = Line2D.from_points(vector2d(0, 0), vector2d(1, 1))
        assert l.slope == 1
        assert l.intercept == 0

        l = Line2D.from_points((1, 3), (3, 7))
        assert l == Line2D(2, 1)

        with pytest.raises(DegenerateInput):
            Line2D.from_points(vector2d(1, 1), vector2d(1, 1))

        # vertical line
        with pytest.raises(DegenerateInput):
            Line2D.from_points(vector2d(1, 0), vector2d(1, 5))

        with pytest.raises(WrongDimension):
            Line2D.from_points(vector3d(0, 0, 0), vector3d(1, 1, 1))

    def test_from_points_slope_overflow(self) -> None:
        with pytest.raises(DegenerateInput, match="float range"):
            Line2D.from_points(vector2d(0, 0), vector2d(1e-300, 1e300))

    def test_contains(self) -> None:
        l = Line2D(2, 1)
        assert l.y_at(3) == 7
        assert l.contains(vector2d(3, 7))
        assert not l.contains(vector2d(3, 8))

    def test_meet(self) -> None:
        l = Line2D.from_points(vector2d(0, 0), vector2d(1, 1))
        m = Line2D(-1, 2)
        assert l.meet(m) == vector2d(1, 1)
        assert intersect_2d_lines(m, l) == vector2d(1, 1)

    def test_no_solution(self) -> None:
        l = Line2D(1, 0)
        m = Line2D(1, 5)
        assert l.is_parallel(m)
        with pytest.raises(NoSolution):
            intersect_2d_lines(l, m)

    def test_infinite_solutions(self) -> None:
        l = Line2D(1, 0)
        assert l.is_parallel(Line2D(1, 0))
        with pytest.raises(InfiniteSolutions):
            intersect_2d_lines(l, Line2D(1, 0))

    def test_intersection_overflow(self) -> None:
        l = Line2D(1, 0)
        m = Line2D(1 + 2**-52, 1e300)
        assert not l.is_parallel(m)
        with pytest.raises(NoSolution, match="float range"):
            l.meet(m)

    def test_eq(self) -> None:
        assert Line2D(1, 2) == Line2D(1.0, 2.0)
        assert Line2D(1, 2) != Line2D(2, 1)
        assert len({Line2D(1, 2), Line2D(1, 2)}) == 1

    def test_str(self) -> None:
        assert str(Line2D(1, 2)) == "Line2D(slope: 1.0, intercept: 2.0)"


class TestLine3D:
    def test_init(self) -> None:
        l = Line3D(vector3d(1, 2, 3), vector3d(0, 0, 1))
        assert l.point == vector3d(1, 2, 3)
        assert l.direction == vector3d(0, 0, 1)
        assert Line3D((1, 2, 3), (0, 0, 1)) == l

    def test_zero_direction(self) -> None:
        with pytest.raises(DegenerateInput):
            Line3D(vector3d(1, 2, 3), vector3d(0, 0, 0))

    def test_wrong_dimension(self) -> None:
        with pytest.raises(WrongDimension):
            Line3D(vector2d(1, 2), vector3d(0, 0, 1))
        with pytest.raises(WrongDimension):
            Line3D(vector3d(1, 2, 3), vector2d(0, 1))

    def test_from_points(self) -> None:
        l = Line3D.from_points(vector3d(1, 0, 0), vector3d(2, 2, 2))
        assert l.point == vector3d(1, 0, 0)
        assert l.direction == vector3d(1, 2, 2)

        with pytest.raises(DegenerateInput):
            Line3D.from_points(vector3d(1, 0, 0), vector3d(1, 0, 0))

    def test_point_at(self) -> None:
        l = Line3D(vector3d(1, 0, 0), vector3d(1, 2, 2))
        assert l.point_at(0) == vector3d(1, 0, 0)
        assert l.point_at(2) == vector3d(3, 4, 4)
        assert l.contains(vector3d(3, 4, 4))
        assert not l.contains(vector3d(3, 4, 5))

    def test_parametric_form(self) -> None:
        l = Line3D(vector3d(1, 2, -3), vector3d(4, -5, 0.5))
        assert l.to_parametric_form() == ("x = 1 + 4 * t", "y = 2 - 5 * t", "z = -3 + 0.5 * t")

    def test_symmetric_form(self) -> None:
        l = Line3D(vector3d(1, 2, 3), vector3d(4, 5, 6))
        assert l.to_symmetric_form() == "(x - 1) / 4 = (y - 2) / 5 = (z - 3) / 6"

        l = Line3D(vector3d(1, 2, 3), vector3d(4, 0, 6))
        assert l.to_symmetric_form() == "(x - 1) / 4 = (z - 3) / 6, y = 2"

        l = Line3D(vector3d(-1, 2, 3), vector3d(0, 0, -2))
        assert l.to_symmetric_form() == "(z - 3) / -2, x = -1, y = 2"

        l = Line3D(vector3d(-1, 0, 3), vector3d(1, 1, 0))
        assert l.to_symmetric_form() == "(x + 1) / 1 = (y - 0) / 1, z = 3"

    def test_meet(self) -> None:
        l = Line3D(vector3d(0, 0, 0), vector3d(1, 0, 0))
        m = Line3D(vector3d(2, -1, 0), vector3d(0, 1, 0))
        assert l.meet(m) == vector3d(2, 0, 0)

        l = Line3D.from_points(vector3d(1, 1, 1), vector3d(3, 3, 3))
        m = Line3D.from_points(vector3d(2, 2, 0), vector3d(2, 2, 4))
        assert intersect_3d_lines(l, m).isclose(vector3d(2, 2, 2))

    def test_meet_parallel(self) -> None:
        l = Line3D(vector3d(0, 0, 0), vector3d(1, 0, 0))
        assert l.is_parallel(Line3D(vector3d(0, 1, 0), vector3d(-2, 0, 0)))
        with pytest.raises(NoSolution):
            l.meet(Line3D(vector3d(0, 1, 0), vector3d(-2, 0, 0)))
        with pytest.raises(InfiniteSolutions):
            l.meet(Line3D(vector3d(5, 0, 0), vector3d(3, 0, 0)))

    def test_meet_skew(self) -> None:
        l = Line3D(vector3d(0, 0, 0), vector3d(1, 0, 0))
        m = Line3D(vector3d(0, 0, 1), vector3d(0, 1, 0))
        assert not l.is_parallel(m)
        with pytest.raises(NoSolution):
            l.meet(m)

    @pytest.mark.parametrize("scale", [1e-5, 1e-3, 1e3, 1e8])
    def test_meet_direction_scale(self, scale: float) -> None:
        l = Line3D(vector3d(0, 0, 0), vector3d(scale, 0, 0))
        m = Line3D(vector3d(0, 0, 0), vector3d(0, scale, 0))
        assert l.meet(m) == vector3d(0, 0, 0)

        m = Line3D(vector3d(2, -1, 0), vector3d(0, scale, 0))
        assert l.meet(m) == vector3d(2, 0, 0)

        with pytest.raises(NoSolution, match="skew"):
            l.meet(Line3D(vector3d(0, 0, 1e-6), vector3d(0, scale, 0)))
        with pytest.raises(NoSolution, match="parallel"):
            l.meet(Line3D(vector3d(0, 1e-6, 0), vector3d(2 * scale, 0, 0)))
        with pytest.raises(InfiniteSolutions):
            l.meet(Line3D(vector3d(5, 0, 0), vector3d(-scale, 0, 0)))

    def test_meet_random(self, rng: np.random.Generator) -> None:
        for _ in range(10):
            p = vector3d(*rng.normal(size=3))
            e = vector3d(*rng.normal(size=3))
            l = Line3D(p, vector3d(*rng.normal(size=3)))
            m = Line3D(p + e * 1.5, e)
            assert l.meet(m).isclose(p, atol=1e-6)

    def test_str(self) -> None:
        l = Line3D(vector3d(1, 2, 3), vector3d(0, 0, 1))
        assert str(l) == "Line3D(point: [1.0, 2.0, 3.0], direction: [0.0, 0.0, 1.0])"
        assert repr(l) == "Line3D(point=[1.0, 2.0, 3.0], direction=[0.0, 0.0, 1.0])"
