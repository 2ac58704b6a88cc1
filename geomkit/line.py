from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

import numpy as np
from typing_extensions import TypeAlias, override

from geomkit.base import EQ_TOL_ABS, Describable
from geomkit.exceptions import DegenerateInput, InfiniteSolutions, InvalidLine, NoSolution
from geomkit.operators import are_parallel
from geomkit.utils import format_number, is_real_scalar
from geomkit.vector import Vector, as_vector, vector2d

if TYPE_CHECKING:
    from typing_extensions import Self

    from geomkit.utils.typing import RealScalar, VectorLike

_AXES = ("x", "y", "z")


class Line2D(Describable):
    """A line in the plane given by the equation ``y = slope * x + intercept``.

    Vertical lines cannot be represented.

    Args:
        slope: The slope of the line.
        intercept: The y-coordinate of the point where the line crosses the y-axis.

    Raises:
        InvalidLine: If the slope or the intercept is not a finite real number.

    """

    def __init__(self, slope: RealScalar, intercept: RealScalar) -> None:
        for name, value in (("slope", slope), ("intercept", intercept)):
            if not is_real_scalar(value):
                raise InvalidLine(f"The {name} of a 2D line must be a real number, got {value!r}.")
            if not np.isfinite(value):
                raise InvalidLine(f"The {name} of a 2D line must be finite, got {value}.")

        self._slope = float(slope)
        self._intercept = float(intercept)

    @classmethod
    def from_points(cls, p1: VectorLike, p2: VectorLike) -> Self:
        """Constructs the line through two points.

        Args:
            p1, p2: Two distinct 2D points with different x-coordinates.

        Returns:
            The line through both points.

        Raises:
            WrongDimension: If one of the points is not two-dimensional.
            DegenerateInput: If the points coincide or lie on a vertical line.

        """
        p1, p2 = as_vector(p1, 2), as_vector(p2, 2)
        if p1 == p2:
            raise DegenerateInput("Cannot construct a line from two coincident points.")
        if p1.x == p2.x:
            raise DegenerateInput(f"The points {p1} and {p2} lie on a vertical line, which has no finite slope.")

        slope = (p2.y - p1.y) / (p2.x - p1.x)
        intercept = p1.y - slope * p1.x
        if not (np.isfinite(slope) and np.isfinite(intercept)):
            raise DegenerateInput(
                f"The line through {p1} and {p2} is too steep, its slope or intercept exceeds the float range."
            )
        return cls(slope, intercept)

    @property
    def slope(self) -> float:
        return self._slope

    @property
    def intercept(self) -> float:
        return self._intercept

    @property
    def direction(self) -> Vector:
        """A direction vector of the line, i.e. ``(1, slope)``."""
        return vector2d(1, self._slope)

    @property
    @override
    def properties(self) -> dict[str, Any]:
        return {"slope": self._slope, "intercept": self._intercept}

    def y_at(self, x: RealScalar) -> float:
        """Evaluates the line equation at the given x-coordinate."""
        return self._slope * float(x) + self._intercept

    def contains(self, point: VectorLike) -> bool:
        """Tests whether the 2D point lies exactly on the line."""
        point = as_vector(point, 2)
        return point.y == self.y_at(point.x)

    def is_parallel(self, other: Line2D) -> bool:
        """Tests whether two lines have the same slope. Identical lines are parallel, too."""
        return self._slope == other._slope

    def meet(self, other: Line2D) -> Vector:
        """Intersects this line with another line, see :func:`intersect_2d_lines`."""
        return intersect_2d_lines(self, other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self._slope == other._slope and self._intercept == other._intercept

    @override
    def __hash__(self) -> int:
        return hash((Line2D, self._slope, self._intercept))

    @override
    def __repr__(self) -> str:
        return f"Line2D(slope={self._slope}, intercept={self._intercept})"


class Line3D(Describable):
    """A line in three-dimensional space given by a point and a direction, i.e. all points ``point + t * direction``.

    Args:
        point: A point on the line.
        direction: The direction of the line, must not be the zero vector.

    Raises:
        WrongDimension: If the point or the direction is not three-dimensional.
        DegenerateInput: If the direction is the zero vector.

    """

    def __init__(self, point: VectorLike, direction: VectorLike) -> None:
        self._point = as_vector(point, 3)
        self._direction = as_vector(direction, 3)
        if self._direction.is_zero():
            raise DegenerateInput("The direction vector of a line cannot be the zero vector.")

    @classmethod
    def from_points(cls, p1: VectorLike, p2: VectorLike) -> Self:
        """Constructs the line through two points, with the direction pointing from `p1` to `p2`.

        Raises:
            WrongDimension: If one of the points is not three-dimensional.
            DegenerateInput: If the points coincide.

        """
        p1, p2 = as_vector(p1, 3), as_vector(p2, 3)
        if p1 == p2:
            raise DegenerateInput("Cannot construct a line from two coincident points.")
        return cls(p1, p2 - p1)

    @property
    def point(self) -> Vector:
        return self._point

    @property
    def direction(self) -> Vector:
        return self._direction

    @property
    @override
    def properties(self) -> dict[str, Any]:
        return {"point": self._point.array.tolist(), "direction": self._direction.array.tolist()}

    def point_at(self, t: RealScalar) -> Vector:
        """Returns the point ``point + t * direction``."""
        return self._point + self._direction * t

    def contains(self, point: VectorLike) -> bool:
        """Tests whether the 3D point lies exactly on the line."""
        return are_parallel(as_vector(point, 3) - self._point, self._direction)

    def is_parallel(self, other: Line3D) -> bool:
        """Tests whether the directions of two lines are parallel. Identical lines are parallel, too."""
        return are_parallel(self._direction, other._direction)

    def meet(self, other: Line3D) -> Vector:
        """Intersects this line with another line, see :func:`intersect_3d_lines`."""
        return intersect_3d_lines(self, other)

    def to_parametric_form(self) -> tuple[str, str, str]:
        """Returns the coordinate equations of the line in parametric form.

        Returns:
            The three equations ``x = x0 + dx * t``, ``y = y0 + dy * t`` and ``z = z0 + dz * t``.

        """
        equations = []
        for axis, p, d in zip(_AXES, self._point, self._direction):
            sign = "-" if d < 0 else "+"
            equations.append(f"{axis} = {format_number(p)} {sign} {format_number(abs(d))} * t")
        return equations[0], equations[1], equations[2]

    def to_symmetric_form(self) -> str:
        """Returns the equation of the line in symmetric form.

        Axes with a non-zero direction component appear as ratios ``(x - x0) / dx`` joined by ``=``. For an axis with a
        zero direction component, the coordinate is constant and the equation ``y = y0`` is appended instead.

        Example:
            The line through ``(1, 2, 3)`` with direction ``(4, 0, 6)`` gives ``"(x - 1) / 4 = (z - 3) / 6, y = 2"``.

        """
        ratios = []
        constants = []
        for axis, p, d in zip(_AXES, self._point, self._direction):
            if d == 0:
                constants.append(f"{axis} = {format_number(p)}")
            elif p < 0:
                ratios.append(f"({axis} + {format_number(-p)}) / {format_number(d)}")
            else:
                ratios.append(f"({axis} - {format_number(p)}) / {format_number(d)}")
        return ", ".join([" = ".join(ratios), *constants])

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line3D):
            return NotImplemented
        return self._point == other._point and self._direction == other._direction

    @override
    def __hash__(self) -> int:
        return hash((Line3D, self._point, self._direction))

    @override
    def __repr__(self) -> str:
        return f"Line3D(point={self._point.array.tolist()}, direction={self._direction.array.tolist()})"


Line: TypeAlias = Union[Line2D, Line3D]


def intersect_2d_lines(line1: Line2D, line2: Line2D) -> Vector:
    """Calculates the intersection point of two 2D lines.

    Args:
        line1, line2: The lines to intersect.

    Returns:
        The point where both lines meet.

    Raises:
        InfiniteSolutions: If the lines are identical.
        NoSolution: If the lines are parallel and distinct.

    """
    if line1.slope == line2.slope:
        if line1.intercept == line2.intercept:
            raise InfiniteSolutions("Infinite solutions: the lines are identical.")
        raise NoSolution("No solution: the lines are parallel.")

    x = (line2.intercept - line1.intercept) / (line1.slope - line2.slope)
    y = line1.slope * x + line1.intercept
    if not (np.isfinite(x) and np.isfinite(y)):
        raise NoSolution("No solution: the intersection point exceeds the float range.")
    return vector2d(x, y)


def intersect_3d_lines(line1: Line3D, line2: Line3D, tol: float = EQ_TOL_ABS) -> Vector:
    """Calculates the intersection point of two 3D lines.

    Unlike the 2D case, the tests for parallel and coplanar lines use a tolerance, since the intersection point of two
    lines in space is rarely exactly representable. The tolerance bounds the sine of the angles involved, so the
    result does not depend on the length of the direction vectors or the distance of the points.

    Args:
        line1, line2: The lines to intersect.
        tol: The accepted tolerance on the sine of the angle between the lines and between the connecting vector of
            their points and the plane they span.

    Returns:
        The point where both lines meet.

    Raises:
        InfiniteSolutions: If the lines coincide.
        NoSolution: If the lines are parallel and distinct or skew.

    """
    d = line1.direction.normalize()
    e = line2.direction.normalize()
    w = line2.point - line1.point
    n = d.cross(e)
    w_norm = w.magnitude()

    if n.magnitude() <= tol:
        if w.cross(d).magnitude() <= tol * w_norm:
            raise InfiniteSolutions("Infinite solutions: the lines are identical.")
        raise NoSolution("No solution: the lines are parallel.")

    if abs(w.dot(n)) > tol * w_norm * n.magnitude():
        raise NoSolution("No solution: the lines are skew.")

    s = w.cross(e).dot(n) / n.dot(n)
    return line1.point + d * s
