#
# PROJECT: raytracer
# MODULE: raytracer/ppm.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Canvas
from .color import Color, MAX_CHANNEL

MAGIC_NUMBER = "P3"
MAX_LINE_LENGTH = 70


def color_to_ppm(color: Color) -> str:
    """'r g b' for one pixel, clamped then scaled to 0-255."""
    r, g, b = color.to_rgb255()
    return f"{r} {g} {b}"


def split_long_lines(line: str, limit: int = MAX_LINE_LENGTH) -> str:
    """
    Re-wrap a space-separated line so no physical line exceeds `limit`.
    Tokens are packed greedily and never split; a break is inserted before
    any token that would push the current line past the limit.
    """
    out = []
    current = ""
    for token in line.split():
        if not current:
            current = token
        elif len(current) + 1 + len(token) > limit:
            out.append(current)
            current = token
        else:
            current += " " + token
    out.append(current)
    return "\n".join(out)


def row_to_ppm(row) -> str:
    return split_long_lines(" ".join(color_to_ppm(c) for c in row))


def canvas_to_ppm(canvas: Canvas) -> str:
    """
    Serialize a canvas as plain-text PPM (P3).

    Layout:
      P3
      <width> <height>
      255
      one wrapped block per row, top to bottom, ending in a newline
    """
    header = f"{MAGIC_NUMBER}\n{canvas.width} {canvas.height}\n{MAX_CHANNEL}\n"
    # A zero-height canvas still gets an (empty) pixel section and newline
    body = "\n".join(row_to_ppm(row) for row in canvas.rows())
    return header + body + "\n"
