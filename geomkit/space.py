from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar

from typing_extensions import override

from geomkit.base import Describable
from geomkit.exceptions import InfiniteSolutions, NoSolution
from geomkit.line import Line2D, Line3D, intersect_2d_lines, intersect_3d_lines
from geomkit.utils import pairs
from geomkit.vector import Vector

LineT = TypeVar("LineT", Line2D, Line3D)


class Space(Describable, Generic[LineT]):
    """Base class for collections of lines of a single dimension. Space2D and Space3D are subclasses.

    Every line is contained at most once. Adding an object of another type raises a :class:`TypeError`.

    Args:
        objects: The lines initially contained in the space.

    """

    dim: ClassVar[int]
    _element_class: ClassVar[type]

    def __init__(self, objects: Iterable[LineT] = ()) -> None:
        self._objects: set[LineT] = set()
        for obj in objects:
            self.add(obj)

    @property
    def objects(self) -> frozenset[LineT]:
        """A snapshot of the lines contained in the space."""
        return frozenset(self._objects)

    @property
    @override
    def properties(self) -> dict[str, Any]:
        return {"number_of_objects": len(self._objects)}

    def add(self, obj: LineT) -> None:
        if not isinstance(obj, self._element_class):
            raise TypeError(
                f"{self.__class__.__name__} can only contain {self._element_class.__name__} objects, "
                f"not {type(obj).__name__}."
            )
        self._objects.add(obj)

    def remove(self, obj: LineT) -> None:
        """Removes a line from the space, raises a :class:`KeyError` if it is not contained."""
        self._objects.remove(obj)

    def discard(self, obj: LineT) -> None:
        """Removes a line from the space if it is contained."""
        self._objects.discard(obj)

    @abstractmethod
    def calculate_line_solution(self, line1: LineT, line2: LineT) -> Vector:
        """Calculates the intersection point of two lines.

        Raises:
            NoSolution: If the lines do not intersect.
            InfiniteSolutions: If the lines are identical.

        """

    def intersections(self) -> dict[frozenset[LineT], Vector]:
        """Calculates the intersection points of all pairs of lines in the space.

        Returns:
            A mapping from each pair of lines that meet in a single point to that point. Pairs of parallel, skew or
            identical lines are left out.

        """
        result = {}
        for _, _, a, b in pairs(self._objects):
            try:
                result[frozenset((a, b))] = self.calculate_line_solution(a, b)
            except (NoSolution, InfiniteSolutions):
                continue
        return result

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def __iter__(self) -> Iterator[LineT]:
        return iter(self._objects)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(map(repr, self._objects))})"


class Space2D(Space[Line2D]):
    """A collection of lines in the plane."""

    dim = 2
    _element_class = Line2D

    @override
    def calculate_line_solution(self, line1: Line2D, line2: Line2D) -> Vector:
        return intersect_2d_lines(line1, line2)


class Space3D(Space[Line3D]):
    """A collection of lines in three-dimensional space."""

    dim = 3
    _element_class = Line3D

    @override
    def calculate_line_solution(self, line1: Line3D, line2: Line3D) -> Vector:
        return intersect_3d_lines(line1, line2)
