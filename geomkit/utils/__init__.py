from collections.abc import Generator, Iterable
from itertools import combinations
from typing import TypeVar

from geomkit.utils.math import all_finite, format_number, is_real_dtype, is_real_scalar

T = TypeVar("T")


def pairs(iterable: Iterable[T]) -> Generator[tuple[int, int, T, T], None, None]:
    """A simple generator that returns every unordered pair of elements of an iterable.

    Args:
        iterable: The iterable to pair up.

    Yields:
        Tuples ``(i, j, a, b)`` with ``i < j`` where ``a`` and ``b`` are the elements at positions ``i`` and ``j``.

    """
    for (i, a), (j, b) in combinations(enumerate(iterable), 2):
        yield i, j, a, b
