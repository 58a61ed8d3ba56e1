#
# PROJECT: raytracer
# MODULE: raytracer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .color import Color, BLACK

logger = logging.getLogger(__name__)


class Canvas:
    """
    Fixed-size grid of Colors, stored as `height` rows of `width` cells.

    Every cell starts black. Writes outside the grid are discarded rather
    than wrapped or clamped, so callers may plot without bounds checks.
    """
    __slots__ = ['width', 'height', 'pixels']

    def __init__(self, width: int, height: int):
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Canvas {name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"Canvas {name} must be >= 0, got {value}")
        self.width, self.height = width, height
        # Row-major: pixels[y][x]
        self.pixels = [[BLACK] * width for _ in range(height)]
        logger.debug("Allocated %dx%d canvas", width, height)

    def __repr__(self):
        return f"Canvas({self.width}, {self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, color: Color) -> bool:
        """Store color at (x, y). Returns False if the write was discarded."""
        if not self.in_bounds(x, y):
            return False
        self.pixels[y][x] = color
        return True

    def pixel_at(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self.pixels[y][x]

    def fill(self, color: Color):
        for row in self.pixels:
            for x in range(self.width):
                row[x] = color

    def rows(self):
        """Iterate rows top to bottom, each a list of Colors left to right."""
        return iter(self.pixels)
