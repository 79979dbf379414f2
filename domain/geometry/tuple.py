# domain/geometry/tuple.py
from typing import Iterable, Optional
from pydantic import Field
import math
from domain.geometry.constants import POINT_W, VECTOR_W
from domain.geometry.tolerance import is_approx
from utils.base_model import ImmutableModel


class NotAVectorError(ValueError):
    """Raised when an operation defined only for vectors receives a tuple with w != 0."""


def _divide(value: float, divisor: float) -> float:
    """Divide with IEEE semantics: x/0 gives a signed infinity, 0/0 gives NaN."""
    if divisor != 0:
        return value / divisor
    if value == 0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value) * math.copysign(1.0, divisor)


class Tuple(ImmutableModel):
    """
    Homogeneous 4-component tuple representing a point (w=1) or a vector (w=0).

    The point/vector convention lives in the w component and is not enforced at
    construction: arithmetic is componentwise over all four components, so
    point - point yields a vector and point + vector yields a point, while
    point + point yields the meaningless w=2. Operations that only make sense
    for vectors (cross) check the convention at runtime.

    Equality is approximate: components are compared with is_approx using the
    default EPSILON. As with any tolerance comparison it is not strictly
    transitive for values near the tolerance boundary, and tuples are not
    hashable.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")
    z: float = Field(description="Z component")
    w: float = Field(description="W component, 1.0 for points and 0.0 for vectors")

    __hash__ = None

    @classmethod
    def new(cls, x: float, y: float, z: float, w: float) -> "Tuple":
        """Create a tuple from four raw components, without validation of w."""
        return cls(x=x, y=y, z=z, w=w)

    @classmethod
    def from_point(cls, x: float, y: float, z: float) -> "Tuple":
        """Create a point (w=1)."""
        return cls(x=x, y=y, z=z, w=POINT_W)

    @classmethod
    def from_vector(cls, x: float, y: float, z: float) -> "Tuple":
        """Create a vector (w=0)."""
        return cls(x=x, y=y, z=z, w=VECTOR_W)

    @classmethod
    def from_iter(cls, values: Iterable[float]) -> "Tuple":
        """Create a tuple from any iterable of exactly four components."""
        components = list(values)
        if len(components) != 4:
            raise ValueError(f"Tuple requires exactly four components, got {len(components)}")
        x, y, z, w = components
        return cls(x=x, y=y, z=z, w=w)

    def is_point(self) -> bool:
        return self.w == POINT_W

    def is_vector(self) -> bool:
        return self.w == VECTOR_W

    def is_close_to(self, other: "Tuple", tolerance: Optional[float] = None) -> bool:
        """
        Check if every component is within the tolerance of the other tuple's.

        Args:
            other: The tuple to compare with
            tolerance: Maximum difference per component.
                      If None, uses the default EPSILON value.

        Returns:
            True if all four components are approximately equal
        """
        return (
            is_approx(self.x, other.x, tolerance)
            and is_approx(self.y, other.y, tolerance)
            and is_approx(self.z, other.z, tolerance)
            and is_approx(self.w, other.w, tolerance)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.is_close_to(other)

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z, w=self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z, w=self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar, w=self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(
            x=_divide(self.x, scalar),
            y=_divide(self.y, scalar),
            z=_divide(self.z, scalar),
            w=_divide(self.w, scalar),
        )

    def magnitude(self) -> float:
        """Euclidean norm over all four components."""
        return math.hypot(self.x, self.y, self.z, self.w)

    def normalize(self) -> "Tuple":
        """
        Scale the tuple to unit magnitude.

        A zero-magnitude tuple has no direction; its normalization has NaN components.
        """
        return self / self.magnitude()

    def dot(self, other: "Tuple") -> float:
        """Sum of componentwise products, w included."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        """
        Calculate the 3D cross product with another vector.

        Args:
            other: The right-hand operand

        Returns:
            A vector perpendicular to both operands

        Raises:
            NotAVectorError: If either operand is not a vector (w != 0)
        """
        if not self.is_vector():
            raise NotAVectorError(f"Cross product requires vectors, left operand is {self}")
        if not other.is_vector():
            raise NotAVectorError(f"Cross product requires vectors, right operand is {other}")

        return Tuple.from_vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def format_as_tuple(self) -> str:
        """Format the tuple as a tuple string."""
        return f"({self.x}, {self.y}, {self.z}, {self.w})"

    def __str__(self) -> str:
        return self.format_as_tuple()


def point(x: float, y: float, z: float) -> Tuple:
    """Shorthand for Tuple.from_point."""
    return Tuple.from_point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    """Shorthand for Tuple.from_vector."""
    return Tuple.from_vector(x, y, z)
