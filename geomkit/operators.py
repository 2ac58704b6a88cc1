from __future__ import annotations

from collections.abc import Collection

import numpy as np

from geomkit.base import ValidationResult
from geomkit.exceptions import DegenerateVector, DimensionMismatch, EmptyInput
from geomkit.utils import pairs
from geomkit.vector import Vector


def are_orthogonal(v1: Vector, v2: Vector) -> bool:
    """Tests whether two vectors are orthogonal, i.e. their dot product is exactly zero.

    Args:
        v1, v2: Two vectors of the same dimension.

    Returns:
        True if the dot product of the vectors is zero.

    Raises:
        DimensionMismatch: If the dimensions of the vectors differ.

    """
    return v1.dot(v2) == 0.0


def are_parallel(v1: Vector, v2: Vector) -> bool:
    """Tests whether two vectors are scalar multiples of each other.

    The zero vector is considered parallel to every vector, also to vectors of a different dimension. Otherwise, the
    ratio of the first pair of components with a non-zero component in `v2` has to be the same for all other pairs of
    components, unless both components of a pair are zero. No tolerance is applied.

    Args:
        v1, v2: The vectors to compare.

    Returns:
        True if the vectors are parallel.

    Raises:
        DimensionMismatch: If neither vector is zero and their dimensions differ.

    """
    if v1.is_zero() or v2.is_zero():
        return True
    if v1.dim != v2.dim:
        raise DimensionMismatch(f"Cannot compare vectors of dimension {v1.dim} and {v2.dim}.")

    a, b = v1.array, v2.array
    b_zero = b == 0
    if np.any(a[b_zero] != 0):
        return False

    # scaling by a power of two is exact, it moves the quotients into range without changing which of them are equal
    _, exp_a = np.frexp(np.max(np.abs(a)))
    _, exp_b = np.frexp(np.max(np.abs(b)))
    with np.errstate(over="ignore", under="ignore"):
        quotient = np.ldexp(a[~b_zero], exp_b - exp_a) / b[~b_zero]
    if not np.all(np.isfinite(quotient)) or np.any((quotient == 0) != (a[~b_zero] == 0)):
        return False
    return bool(np.all(quotient == quotient[0]))


def angle(v1: Vector, v2: Vector) -> float:
    """Calculates the (unoriented) angle between two vectors.

    Args:
        v1, v2: Two non-zero vectors of the same dimension.

    Returns:
        The angle in radians, between 0 and pi.

    Raises:
        DegenerateVector: If one of the vectors is the zero vector.
        DimensionMismatch: If the dimensions of the vectors differ.

    """
    if v1.is_zero() or v2.is_zero():
        raise DegenerateVector("The angle is not defined for the zero vector.")
    cos = v1.normalize().dot(v2.normalize())
    return float(np.arccos(np.clip(cos, -1, 1)))


def are_valid_basis_vectors(vectors: Collection[Vector], subspace_dim: int | None = None) -> ValidationResult:
    """Checks whether the given vectors form a basis.

    The rules are checked in the following order and the first violated rule determines the reason of the result:

    1. the number of vectors equals the dimension of the (sub)space,
    2. all vectors have the same dimension,
    3. no vector is the zero vector,
    4. no two vectors are parallel,
    5. for three or more vectors, the matrix with the vectors as rows has full rank.

    Args:
        vectors: The candidate basis vectors. The dimension of the first vector is the dimension of the space.
        subspace_dim: The dimension of the subspace the vectors should span. By default, the vectors have to span the
            whole space.

    Returns:
        The result of the validation.

    Raises:
        EmptyInput: If no vectors are given.

    """
    vectors = list(vectors)
    if len(vectors) == 0:
        raise EmptyInput("At least one vector is required to form a basis.")

    n = vectors[0].dim
    expected = n if subspace_dim is None else subspace_dim

    if len(vectors) != expected:
        return ValidationResult.invalid("count must equal dimension")
    if any(v.dim != n for v in vectors):
        return ValidationResult.invalid("dimension mismatch")
    if any(v.is_zero() for v in vectors):
        return ValidationResult.invalid("zero vector")
    if any(are_parallel(a, b) for _, _, a, b in pairs(vectors)):
        return ValidationResult.invalid("not linearly independent")

    # pairwise independence is only sufficient for up to two vectors. The rank uses the default SVD tolerance of
    # numpy, so nearly dependent sets of three or more vectors are rejected as well.
    if len(vectors) >= 3 and np.linalg.matrix_rank(np.stack([v.array for v in vectors])) < len(vectors):
        return ValidationResult.invalid("not linearly independent")

    return ValidationResult.valid()
