from geomkit.base import ValidationResult
from geomkit.exceptions import (
    DegenerateInput,
    DegenerateVector,
    DimensionHintWarning,
    DimensionMismatch,
    EmptyInput,
    GeometryException,
    InfiniteSolutions,
    InvalidBasis,
    InvalidLine,
    InvalidVector,
    NoSolution,
    WrongDimension,
)
from geomkit.line import Line, Line2D, Line3D, intersect_2d_lines, intersect_3d_lines
from geomkit.operators import angle, are_orthogonal, are_parallel, are_valid_basis_vectors
from geomkit.plane import Plane, PlaneEquation
from geomkit.space import Space, Space2D, Space3D
from geomkit.vector import (
    Vector,
    as_vector,
    check_components,
    cross,
    dot,
    standard_basis,
    vector2d,
    vector3d,
    zero_vector,
)
from geomkit.version import __version__
