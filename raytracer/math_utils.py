#
# PROJECT: raytracer
# MODULE: raytracer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import sys

# Machine epsilon: the gap between 1.0 and the next representable float.
EPSILON = sys.float_info.epsilon


def approx_eq(a: float, b: float) -> bool:
    """True if a and b differ by less than EPSILON.

    Exactly equal values (infinities included) always compare equal.
    """
    if a == b:
        return True
    return abs(a - b) < EPSILON


def _reciprocal(k: float) -> float:
    # Float division by zero raises in Python; keep IEEE semantics instead.
    if k == 0:
        return math.copysign(math.inf, k)
    return 1.0 / k


class Tuple:
    """Immutable 4-component (x, y, z, w) value.

    w is 1.0 for points and 0.0 for vectors by convention of point() and
    vector(); nothing enforces it, so arithmetic can produce other w values.
    Subtracting two points yields a vector (w=0) as a consequence.
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))
        object.__setattr__(self, 'w', float(w))

    def __setattr__(self, name, value):
        raise AttributeError("Tuple is immutable")

    def __delattr__(self, name):
        raise AttributeError("Tuple is immutable")

    def __repr__(self):
        return f"Tuple({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        if index == 3: return self.w
        raise IndexError("Tuple index out of range")

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return (approx_eq(self.x, other.x) and
                approx_eq(self.y, other.y) and
                approx_eq(self.z, other.z) and
                approx_eq(self.w, other.w))

    # Tolerant equality cannot be made consistent with hashing.
    __hash__ = None

    def is_point(self) -> bool:
        return approx_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        return approx_eq(self.w, 0.0)

    def add(self, other: 'Tuple') -> 'Tuple':
        return Tuple(self.x + other.x, self.y + other.y,
                     self.z + other.z, self.w + other.w)

    def sub(self, other: 'Tuple') -> 'Tuple':
        return Tuple(self.x - other.x, self.y - other.y,
                     self.z - other.z, self.w - other.w)

    def negate(self) -> 'Tuple':
        return vector(0.0, 0.0, 0.0).sub(self)

    def scale(self, k: float) -> 'Tuple':
        return Tuple(self.x * k, self.y * k, self.z * k, self.w * k)

    def divide(self, k: float) -> 'Tuple':
        """Scale by 1/k.

        Unchecked: k == 0 yields infinities (or NaN for zero components)
        rather than raising. Callers that need safety must check k first.
        """
        return self.scale(_reciprocal(k))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y +
                         self.z * self.z + self.w * self.w)

    def normalize(self) -> 'Tuple':
        """Unit-length copy. A zero-magnitude tuple gives NaN components."""
        return self.divide(self.magnitude())

    def dot(self, other: 'Tuple') -> float:
        return (self.x * other.x + self.y * other.y +
                self.z * other.z + self.w * other.w)

    def cross(self, other: 'Tuple') -> 'Tuple':
        """3D cross product of x/y/z. Always returns a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def __add__(self, other):
        if isinstance(other, Tuple):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Tuple):
            return self.sub(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return self.scale(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (int, float)):
            return self.divide(scalar)
        return NotImplemented


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


def round_half_away(v: float) -> int:
    """Round to the nearest int, halves away from zero (2.5 -> 3, -2.5 -> -3).

    The builtin round() sends halves to the even neighbour instead.
    """
    a = abs(v)
    r = math.floor(a)
    # a - floor(a) is exact; a + 0.5 would round in floating point
    if a - r >= 0.5:
        r += 1
    return int(math.copysign(r, v))
