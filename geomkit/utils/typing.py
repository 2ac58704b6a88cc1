from __future__ import annotations

from collections.abc import Iterable
from numbers import Real
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    from geomkit.vector import Vector

RealScalarType: TypeAlias = Union[np.integer, np.floating]
RealDType: TypeAlias = np.dtype[RealScalarType]
RealScalar: TypeAlias = Union[Real, RealScalarType]
VectorLike: TypeAlias = Union["Vector", Iterable[RealScalar], np.ndarray]
