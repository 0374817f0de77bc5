"""Immutable fixed-size vectors used for points, directions and colors.

Every operation returns a new vector; nothing is mutated in place. The same
``Vector3`` type doubles as an RGB color triple (see ``RGB``), which is why the
vectors also carry color helpers such as ``clamp255`` and ``ppm``.

Ordering operators compare vectors by squared length, not lexicographically:

    >>> Vector3(3.0, 0.0, 0.0) < Vector3(0.0, 0.0, 4.0)
    True

Equality is exact, component by component, with no epsilon tolerance.

Normalizing a zero-length vector is a precondition violation. It is not
guarded: the float division raises ``ZeroDivisionError``.

Example:
    >>> a = Vector3(1.0, 1.1, 1.2)
    >>> b = Vector3(1.3, 1.4, 1.5)
    >>> a + b
    Vector3(x=2.3, y=2.5, z=2.7)
    >>> round(a.dot(b), 2)
    4.64
    >>> str(a.cross(b))
    '[-0.03, 0.06, -0.03]'
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def _clamp_channel(value: float) -> float:
    # NaN falls through both comparisons unchanged
    if value > 255:
        return 255.0
    if value < 0:
        return 0.0
    return value


def _format_component(value: float) -> str:
    return f"{value:.3g}"


class _VectorOps:
    """Component-wise operations shared by the 2D, 3D and 4D vectors.

    Subclasses are frozen dataclasses whose fields are the components, in
    order. Vector3 overrides the hot-path operations with explicit versions.
    """

    def components(self) -> tuple[float, ...]:
        """Return the components as a plain tuple."""
        raise NotImplementedError

    def _build(self, values: Iterable[float]):
        return type(self)(*values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components())

    def __len__(self) -> int:
        return len(self.components())

    def __add__(self, other):
        return self._build(a + b for a, b in zip(self.components(), other.components()))

    def __sub__(self, other):
        return self._build(a - b for a, b in zip(self.components(), other.components()))

    def __mul__(self, scalar: float):
        return self._build(a * scalar for a in self.components())

    def __rmul__(self, scalar: float):
        return self * scalar

    def __truediv__(self, scalar: float):
        # Multiply by the reciprocal, matching the rest of the vector algebra
        r = 1.0 / scalar
        return self._build(a * r for a in self.components())

    def __neg__(self):
        return self._build(-a for a in self.components())

    def dot(self, other) -> float:
        """Return the dot product with another vector of the same size."""
        return sum(a * b for a, b in zip(self.components(), other.components()))

    def length_squared(self) -> float:
        """Return the squared Euclidean length (no square root)."""
        return self.dot(self)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def distance_squared(self, other) -> float:
        """Return the squared distance to another vector."""
        return sum((a - b) * (a - b) for a, b in zip(self.components(), other.components()))

    def distance(self, other) -> float:
        """Return the Euclidean distance to another vector."""
        return math.sqrt(self.distance_squared(other))

    def normalize(self):
        """Return the unit vector pointing in the same direction.

        The caller must ensure the length is non-zero; a zero vector raises
        ``ZeroDivisionError``.
        """
        length = self.length()
        return self._build(a / length for a in self.components())

    def intify(self):
        """Return a vector holding only the integer part of each component.

        Truncates toward zero, so ``-0.7`` becomes ``0.0`` and ``1.9`` becomes
        ``1.0``.
        """
        return self._build(float(int(a)) for a in self.components())

    def clamp255(self):
        """Treat the vector as a color and clamp every channel to [0, 255]."""
        return self._build(_clamp_channel(a) for a in self.components())

    def ppm(self) -> str:
        """Return the integer parts of the components, space separated."""
        return " ".join(str(int(a)) for a in self.components())

    # Magnitude ordering, compared without taking a square root
    def __lt__(self, other) -> bool:
        return self.length_squared() < other.length_squared()

    def __gt__(self, other) -> bool:
        return self.length_squared() > other.length_squared()

    def __le__(self, other) -> bool:
        return self.length_squared() <= other.length_squared()

    def __ge__(self, other) -> bool:
        return self.length_squared() >= other.length_squared()

    def __str__(self) -> str:
        return "[" + ", ".join(_format_component(a) for a in self.components()) + "]"


@dataclass(frozen=True)
class Vector2(_VectorOps):
    """An immutable 2D vector (also usable as a two-channel color)."""

    x: float
    y: float

    def components(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y


@dataclass(frozen=True)
class Vector3(_VectorOps):
    """An immutable 3D vector of doubles.

    Used as a point in space, as a direction, and as an RGB color.

    Attributes:
        x: First component (red channel when used as a color).
        y: Second component (green channel).
        z: Third component (blue channel).
    """

    x: float
    y: float
    z: float

    def components(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        r = 1.0 / scalar
        return Vector3(self.x * r, self.y * r, self.z * r)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance_squared(self, other: Vector3) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def normalize(self) -> Vector3:
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @staticmethod
    def from_iterable(values: Iterable[float]) -> Vector3:
        """Build a vector from exactly three numbers.

        Raises:
            ValueError: If ``values`` does not hold exactly three items.
        """
        items = [float(v) for v in values]
        if len(items) != 3:
            raise ValueError(f"Expected 3 components, got {len(items)}")
        return Vector3(items[0], items[1], items[2])


@dataclass(frozen=True)
class Vector4(_VectorOps):
    """An immutable 4D vector (also usable as an RGBA color)."""

    x: float
    y: float
    z: float
    w: float

    def components(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w


# Aliases that say how a vector is being used
Point2 = Vector2
Point3 = Vector3
RG = Vector2
RGB = Vector3
RGBA = Vector4
