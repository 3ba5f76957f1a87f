# core/vector.py
import math
from typing import Iterator, Union


class Vector3:
    """
    A 3D vector supporting arithmetic, dot and cross products and normalization.
    Doubles as a point in space and as an RGB color.

    Binary operators return new vectors; only the compound assignments
    (+=, *=, /=) update the left operand in place.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vector3", float]) -> "Vector3":
        if isinstance(other, Vector3):
            # Element-wise multiplication (color attenuation).
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other: Union["Vector3", float]) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vector3(self.x / other, self.y / other, self.z / other)

    def __rtruediv__(self, other: float) -> "Vector3":
        return Vector3(other / self.x, other / self.y, other / self.z)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __imul__(self, t: float) -> "Vector3":
        self.x *= t
        self.y *= t
        self.z *= t
        return self

    def __itruediv__(self, t: float) -> "Vector3":
        self.x /= t
        self.y /= t
        self.z /= t
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit_vector(self) -> "Vector3":
        """
        Returns this vector scaled to length 1. The caller guarantees a non-zero length.
        """
        return self / self.length()

    def near_zero(self) -> bool:
        """
        True if every component is within 1e-8 of zero.
        """
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    @staticmethod
    def random(rng) -> "Vector3":
        """Each component uniform in [0, 1)."""
        return Vector3(rng.random(), rng.random(), rng.random())

    @staticmethod
    def random_range(rng, lo: float, hi: float) -> "Vector3":
        """Each component uniform in [lo, hi)."""
        return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def dot(u: Vector3, v: Vector3) -> float:
    return u.dot(v)


def cross(u: Vector3, v: Vector3) -> Vector3:
    return u.cross(v)


def unit_vector(v: Vector3) -> Vector3:
    return v.unit_vector()


# Same type, different roles.
Point3 = Vector3
Color = Vector3
