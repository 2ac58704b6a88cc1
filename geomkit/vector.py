from __future__ import annotations

import warnings
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt
from typing_extensions import overload, override

from geomkit.base import EQ_TOL_ABS, EQ_TOL_REL, MIN_SILENT_DIM, Describable, ValidationResult
from geomkit.exceptions import (
    DegenerateVector,
    DimensionHintWarning,
    DimensionMismatch,
    InvalidVector,
    WrongDimension,
)
from geomkit.utils import all_finite, is_real_dtype, is_real_scalar

if TYPE_CHECKING:
    from typing_extensions import Self

    from geomkit.utils.typing import RealScalar, VectorLike


def check_components(components: object) -> ValidationResult:
    """Checks whether the given components can be used for a vector.

    Args:
        components: A flat sequence or array of components.

    Returns:
        The result of the check. If the components are invalid, the reason states the first problem found.

    """
    try:
        array = np.asarray(components)
    except (TypeError, ValueError):
        return ValidationResult.invalid("components must be a flat sequence of real numbers")

    if array.ndim != 1:
        return ValidationResult.invalid("components must be a flat sequence of real numbers")
    if array.size == 0:
        return ValidationResult.invalid("a vector needs at least one component")
    if not is_real_dtype(array.dtype):
        return ValidationResult.invalid(f"components must be real numbers, not {array.dtype.name}")
    if not all_finite(array):
        return ValidationResult.invalid("components must not be infinite or NaN")
    return ValidationResult.valid()


class Vector(Describable):
    """An immutable vector of finite real numbers with a fixed dimension.

    The components are stored in a read-only numpy array of floats. A vector can be constructed from a single
    iterable, a numpy array or another vector, or from several numbers. Vectors of dimension two and three can be
    created with :func:`vector2d` and :func:`vector3d`.

    Creating a vector with fewer than four components without stating its dimension emits a
    :class:`~geomkit.exceptions.DimensionHintWarning`. The warning is only a hint, pass ``dim`` to silence it.

    Args:
        *args: A single iterable, numpy array or vector, or multiple numbers.
        dim: The expected dimension of the vector. If given, the number of components must match.

    Attributes:
        array: The underlying (read-only) numpy array.

    Raises:
        InvalidVector: If there are no components or a component is not a finite real number.
        WrongDimension: If ``dim`` is given and does not match the number of components.

    """

    array: npt.NDArray[np.float64]

    # numpy defers binary operations with vectors to the methods below
    __array_ufunc__ = None

    def __init__(
        self,
        *args: VectorLike | RealScalar,
        dim: int | None = None,
        _hint_dimension: bool = True,
    ) -> None:
        components: Any
        if len(args) == 1 and not is_real_scalar(args[0]):
            components = args[0]
        else:
            components = args

        if isinstance(components, Vector):
            components = components.array
        elif not isinstance(components, (np.ndarray, Sequence)) and isinstance(components, Iterable):
            components = list(components)

        result = check_components(components)
        if not result:
            raise InvalidVector(f"Invalid vector components: {result.reason}.")

        array = np.array(components, dtype=np.float64)
        n = array.shape[0]
        if dim is not None and n != dim:
            raise WrongDimension(f"Expected a vector of dimension {dim}, but got {n} components.")
        if dim is None and _hint_dimension and n < MIN_SILENT_DIM:
            hint = f"using vector{n}d or passing dim={n}" if n in (2, 3) else f"passing dim={n}"
            warnings.warn(
                f"Creating a vector of dimension {n} without stating its dimension, consider {hint}.",
                category=DimensionHintWarning,
                stacklevel=2,
            )

        array.flags.writeable = False
        self.array = array

    @classmethod
    def _from_array(cls, array: npt.NDArray[np.float64]) -> Self:
        return cls(array, dim=array.shape[0])

    @property
    def dim(self) -> int:
        """The dimension of the vector, i.e. the number of components."""
        return self.array.shape[0]

    @property
    def components(self) -> tuple[float, ...]:
        """The components of the vector as a tuple of floats."""
        return tuple(self.array.tolist())

    def _component(self, index: int, name: str) -> float:
        if self.dim <= index:
            raise WrongDimension(f"A vector of dimension {self.dim} has no {name} component.")
        return float(self.array[index])

    @property
    def x(self) -> float:
        return self._component(0, "x")

    @property
    def y(self) -> float:
        return self._component(1, "y")

    @property
    def z(self) -> float:
        return self._component(2, "z")

    @property
    @override
    def properties(self) -> dict[str, Any]:
        return {"components": self.array.tolist()}

    def _check_dimension(self, other: Vector, operation: str) -> None:
        if self.dim != other.dim:
            raise DimensionMismatch(
                f"Cannot {operation} vectors of dimension {self.dim} and {other.dim}."
            )

    def dot(self, other: Vector) -> float:
        """Calculates the dot product of this vector and another vector.

        Args:
            other: A vector of the same dimension.

        Returns:
            The sum of the element-wise products.

        Raises:
            DimensionMismatch: If the dimensions of the vectors differ.

        """
        self._check_dimension(other, "multiply")
        return float(np.dot(self.array, other.array))

    def cross(self, other: Vector) -> Vector:
        """Calculates the cross product of this vector and another vector. Only defined in three dimensions.

        Args:
            other: A three-dimensional vector.

        Returns:
            The vector orthogonal to both vectors.

        Raises:
            WrongDimension: If one of the vectors is not three-dimensional.

        """
        if self.dim != 3 or other.dim != 3:
            raise WrongDimension(
                f"The cross product is only defined for 3D vectors, got dimensions {self.dim} and {other.dim}."
            )
        return Vector._from_array(np.cross(self.array, other.array))

    def _scaled(self) -> tuple[float, npt.NDArray[np.float64]]:
        # dividing by the largest absolute component keeps the sum of squares from over- or underflowing
        scale = float(np.max(np.abs(self.array)))
        if scale == 0:
            return 0.0, self.array
        return scale, self.array / scale

    def magnitude(self) -> float:
        """The euclidean length of the vector, i.e. the square root of its dot product with itself.

        The result is zero only for the zero vector, also for components close to the limits of the float range.
        """
        scale, scaled = self._scaled()
        return scale * float(np.sqrt(np.dot(scaled, scaled)))

    def normalize(self) -> Vector:
        """Returns the unit vector pointing in the same direction.

        The vector itself is immutable and stays unchanged, a new vector is returned.

        Returns:
            The vector divided by its magnitude.

        Raises:
            DegenerateVector: If the vector is the zero vector.

        """
        if self.is_zero():
            raise DegenerateVector("Cannot normalize the zero vector.")
        _, scaled = self._scaled()
        return Vector._from_array(scaled / np.sqrt(np.dot(scaled, scaled)))

    def is_zero(self) -> bool:
        """Tests whether every component is exactly zero."""
        return bool(np.all(self.array == 0.0))

    def isclose(self, other: Vector, rtol: float = EQ_TOL_REL, atol: float = EQ_TOL_ABS) -> bool:
        """Tests whether two vectors are equal within the given tolerance.

        For documentation of the tolerance parameters see :func:`numpy.allclose`.

        Args:
            other: The vector to compare with.
            rtol: The relative tolerance parameter.
            atol: The absolute tolerance parameter.

        Returns:
            True if the vectors have the same dimension and all components are close.

        """
        if self.dim != other.dim:
            return False
        return bool(np.allclose(self.array, other.array, rtol=rtol, atol=atol))

    def __len__(self) -> int:
        return self.dim

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> Vector: ...

    def __getitem__(self, index: int | slice) -> float | Vector:
        if isinstance(index, slice):
            return Vector._from_array(self.array[index])
        return float(self.array[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self.array.tolist())

    def __array__(self, dtype: npt.DTypeLike | None = None, copy: bool | None = None) -> np.ndarray:
        if dtype is not None and np.dtype(dtype) != self.array.dtype:
            return self.array.astype(dtype)
        if copy:
            return self.array.copy()
        return self.array

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dimension(other, "add")
        return Vector._from_array(self.array + other.array)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_dimension(other, "subtract")
        return Vector._from_array(self.array - other.array)

    def __neg__(self) -> Vector:
        return Vector._from_array(-self.array)

    def __mul__(self, other: object) -> Vector:
        if not is_real_scalar(other):
            return NotImplemented
        return Vector._from_array(self.array * other)

    def __rmul__(self, other: object) -> Vector:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Vector:
        if not is_real_scalar(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Cannot divide a vector by zero.")
        return Vector._from_array(self.array / other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self.array, other.array))

    @override
    def __hash__(self) -> int:
        return hash(self.components)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.array.tolist()})"


def as_vector(value: VectorLike, dim: int | None = None) -> Vector:
    """Converts a value to a vector, without emitting a dimension hint.

    Args:
        value: A vector or a flat sequence of numbers.
        dim: The dimension the vector must have.

    Returns:
        The value itself if it already is a vector of matching dimension, otherwise a new vector.

    Raises:
        InvalidVector: If the value cannot be converted to a vector.
        WrongDimension: If the dimension of the vector does not match ``dim``.

    """
    if isinstance(value, Vector):
        if dim is not None and value.dim != dim:
            raise WrongDimension(f"Expected a vector of dimension {dim}, but got dimension {value.dim}.")
        return value
    return Vector(value, dim=dim, _hint_dimension=False)


def vector2d(x: RealScalar, y: RealScalar) -> Vector:
    """Creates a two-dimensional vector."""
    return Vector(x, y, dim=2)


def vector3d(x: RealScalar, y: RealScalar, z: RealScalar) -> Vector:
    """Creates a three-dimensional vector."""
    return Vector(x, y, z, dim=3)


def zero_vector(dim: int) -> Vector:
    """Creates the zero vector of the given dimension.

    Args:
        dim: The dimension of the vector, at least 1.

    Returns:
        The vector with all components equal to zero.

    """
    return Vector(np.zeros(dim), dim=dim)


def standard_basis(dim: int) -> tuple[Vector, ...]:
    """Creates the standard basis vectors e_1, ..., e_n of the given dimension.

    Args:
        dim: The dimension of the space, at least 1.

    Returns:
        The rows of the identity matrix as vectors.

    """
    if dim < 1:
        raise InvalidVector("Invalid vector components: a vector needs at least one component.")
    return tuple(Vector(row, dim=dim) for row in np.eye(dim))


def dot(a: Vector, b: Vector) -> float:
    """Calculates the dot product of two vectors, same as ``a.dot(b)``."""
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    """Calculates the cross product of two 3D vectors, same as ``a.cross(b)``."""
    return a.cross(b)
