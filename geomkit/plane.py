from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, NamedTuple

from typing_extensions import override

from geomkit.base import Describable
from geomkit.exceptions import InvalidBasis
from geomkit.operators import are_valid_basis_vectors
from geomkit.vector import Vector, as_vector, standard_basis, zero_vector

if TYPE_CHECKING:
    from geomkit.utils.typing import RealScalar, VectorLike


class PlaneEquation(NamedTuple):
    """The coefficients of the implicit plane equation ``a*x + b*y + c*z + d = 0``."""

    a: float
    b: float
    c: float
    d: float


class Plane(Describable):
    """A two-dimensional affine subspace of three-dimensional space.

    The plane consists of the points ``origin + s * basis_vectors[0] + t * basis_vectors[1]``. By default, it is the
    xy-plane through the zero vector.

    Unlike the other geometric objects, a plane is mutable: its origin and basis can be replaced, but the basis is
    validated every time it changes.

    Args:
        origin: A point on the plane.
        basis_vectors: Two linearly independent 3D vectors spanning the plane.

    Raises:
        InvalidBasis: If the basis vectors are not valid.
        WrongDimension: If the origin is not three-dimensional.

    """

    def __init__(self, origin: VectorLike | None = None, basis_vectors: Iterable[VectorLike] | None = None) -> None:
        e1, e2, _ = standard_basis(3)
        self._origin = zero_vector(3)
        self._basis_vectors = (e1, e2)

        if origin is not None:
            self.set_origin(origin)
        if basis_vectors is not None:
            self.set_basis_vectors(basis_vectors)

    @property
    def origin(self) -> Vector:
        return self._origin

    @property
    def basis_vectors(self) -> tuple[Vector, Vector]:
        return self._basis_vectors

    @property
    @override
    def properties(self) -> dict[str, Any]:
        return {
            "origin": self._origin.array.tolist(),
            "basis_vectors": [v.array.tolist() for v in self._basis_vectors],
        }

    def set_origin(self, point: VectorLike) -> None:
        self._origin = as_vector(point, 3)

    def set_basis_vectors(self, vectors: Iterable[VectorLike]) -> None:
        """Replaces the basis vectors of the plane.

        Args:
            vectors: Two linearly independent 3D vectors.

        Raises:
            InvalidBasis: If the vectors do not form a valid basis of a plane in 3D.
            EmptyInput: If no vectors are given.

        """
        basis = [as_vector(v) for v in vectors]
        result = are_valid_basis_vectors(basis, subspace_dim=2)
        if not result:
            raise InvalidBasis(result.reason)
        if basis[0].dim != 3:
            raise InvalidBasis("basis vectors must be three-dimensional")
        self._basis_vectors = (basis[0], basis[1])

    @property
    def normal(self) -> Vector:
        """The normal vector of the plane, i.e. the cross product of the basis vectors."""
        return self._basis_vectors[0].cross(self._basis_vectors[1])

    def equation_parameters(self) -> PlaneEquation:
        """Calculates the coefficients of the implicit equation ``a*x + b*y + c*z + d = 0`` of the plane.

        Returns:
            The coefficients, where ``(a, b, c)`` is the normal vector.

        """
        n = self.normal
        return PlaneEquation(n.x, n.y, n.z, 0.0 - n.dot(self._origin))

    def point_at(self, s: RealScalar, t: RealScalar) -> Vector:
        """Returns the point ``origin + s * basis_vectors[0] + t * basis_vectors[1]``."""
        b0, b1 = self._basis_vectors
        return self._origin + b0 * s + b1 * t

    def contains(self, point: VectorLike) -> bool:
        """Tests whether the 3D point satisfies the plane equation exactly."""
        point = as_vector(point, 3)
        a, b, c, d = self.equation_parameters()
        return a * point.x + b * point.y + c * point.z + d == 0

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self._origin == other._origin and self._basis_vectors == other._basis_vectors

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        b0, b1 = self._basis_vectors
        return f"Plane(origin={self._origin.array.tolist()}, basis_vectors=[{b0.array.tolist()}, {b1.array.tolist()}])"
