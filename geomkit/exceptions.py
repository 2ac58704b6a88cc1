class GeometryException(Exception):
    """A general geometric error occurred."""


class InvalidVector(GeometryException, ValueError):
    """The given components do not form a valid vector (empty, non-numeric or not finite)."""


class DimensionMismatch(GeometryException, ValueError):
    """The vectors of an operation have different dimensions."""


class WrongDimension(DimensionMismatch):
    """An object of a fixed dimension was given a different number of components."""


class DegenerateVector(GeometryException, ValueError):
    """The operation is undefined for the zero vector."""


class InvalidLine(GeometryException, ValueError):
    """The slope or the intercept of a line is not finite."""


class DegenerateInput(GeometryException, ValueError):
    """The input collapses the defining property of the object, e.g. two coincident points."""


class EmptyInput(GeometryException, ValueError):
    """An empty collection was given where at least one element is required."""


class InvalidBasis(GeometryException, ValueError):
    """The given vectors do not form a valid basis.

    Attributes:
        reason (str): Human-readable explanation of why the vectors were rejected.

    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid basis vectors: {reason}.")
        self.reason = reason


class NoSolution(GeometryException, ValueError):
    """The system of line equations has no solution."""


class InfiniteSolutions(GeometryException, ValueError):
    """The system of line equations has infinitely many solutions."""


class DimensionHintWarning(UserWarning):
    """A low-dimensional vector was created without stating its dimension."""
