from __future__ import annotations

from numbers import Number
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from geomkit.utils.typing import RealDType, RealScalar


def is_real_scalar(element: object) -> TypeGuard[RealScalar]:
    """Checks whether an element is a real scalar, i.e. an integer or floating point number.

    0-dimensional arrays are considered scalars, too. Booleans and complex numbers are not.

    Args:
        element: The element to check.

    Returns:
        True if the element is a real scalar.

    """
    if isinstance(element, (bool, np.bool_)):
        return False
    if isinstance(element, (Number, np.number)):
        return not isinstance(element, (complex, np.complexfloating))
    try:
        a = np.asarray(element)
    except (TypeError, ValueError):
        return False
    return a.ndim == 0 and is_real_dtype(a.dtype)


def is_real_dtype(dtype: npt.DTypeLike) -> TypeGuard[RealDType]:
    """Checks whether a dtype is a real numerical dtype, i.e. an integer or floating point type.

    Args:
        dtype: The dtype to check.

    Returns:
        True if the dtype is a real numeric dtype.

    """
    dtype = np.dtype(dtype)
    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


def all_finite(a: npt.ArrayLike) -> bool:
    """Returns True if no element of the array is NaN or infinite."""
    return bool(np.all(np.isfinite(a)))


def format_number(value: float) -> str:
    """Formats a real number for the textual line forms, e.g. ``1.0`` becomes ``"1"``."""
    # -0.0 would otherwise render as "-0"
    return f"{float(value) + 0.0:g}"
