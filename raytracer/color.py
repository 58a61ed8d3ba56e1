#
# PROJECT: raytracer
# MODULE: raytracer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import Optional

from .math_utils import approx_eq, round_half_away

# Largest channel value in 8-bit output.
MAX_CHANNEL = 255


def _clamp(v: float) -> float:
    # NaN has no displayable value; treat it as black.
    if v != v:
        return 0.0
    if v < 0.0: return 0.0
    if v > 1.0: return 1.0
    return v


def _to_byte(v: float) -> int:
    """Scale a [0, 1] channel to [0, 255], rounding half away from zero."""
    return round_half_away(MAX_CHANNEL * v)


class Color:
    """Immutable RGB color.

    Channels are unbounded floats: arithmetic may push them below 0.0 or
    above 1.0. They are only brought into range by clamped(), which the
    PPM writer applies at serialization time.
    """
    __slots__ = ('red', 'green', 'blue')

    def __init__(self, red: float, green: float, blue: float):
        object.__setattr__(self, 'red', float(red))
        object.__setattr__(self, 'green', float(green))
        object.__setattr__(self, 'blue', float(blue))

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    def __delattr__(self, name):
        raise AttributeError("Color is immutable")

    def __repr__(self):
        return f"Color({self.red!r}, {self.green!r}, {self.blue!r})"

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (approx_eq(self.red, other.red) and
                approx_eq(self.green, other.green) and
                approx_eq(self.blue, other.blue))

    __hash__ = None

    def add(self, other: 'Color') -> 'Color':
        return Color(self.red + other.red,
                     self.green + other.green,
                     self.blue + other.blue)

    def scale(self, k: float) -> 'Color':
        return Color(self.red * k, self.green * k, self.blue * k)

    def sub(self, other: 'Color') -> 'Color':
        return self.add(other.scale(-1.0))

    def multiply(self, other: 'Color') -> 'Color':
        """Hadamard (component-wise) product, used to blend colors."""
        return Color(self.red * other.red,
                     self.green * other.green,
                     self.blue * other.blue)

    def clamped(self) -> 'Color':
        return Color(_clamp(self.red), _clamp(self.green), _clamp(self.blue))

    def to_rgb255(self):
        """(r, g, b) ints in [0, 255] of the clamped color."""
        c = self.clamped()
        return (_to_byte(c.red), _to_byte(c.green), _to_byte(c.blue))

    def __add__(self, other):
        if isinstance(other, Color):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Color):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)


def parse_hex_color(hex_str) -> Optional[Color]:
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: Color with channels in [0, 1], or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
    except ValueError:
        return None
    return Color(r / MAX_CHANNEL, g / MAX_CHANNEL, b / MAX_CHANNEL)
