#
# PROJECT: raytracer
# MODULE: raytracer/projectile.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

from .canvas import Canvas
from .color import Color
from .math_utils import Tuple, round_half_away

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Projectile:
    position: Tuple  # point
    velocity: Tuple  # vector

    def in_flight(self) -> bool:
        return self.position.y > 0.0


@dataclass(frozen=True)
class Environment:
    gravity: Tuple  # vector
    wind: Tuple     # vector


def tick(env: Environment, projectile: Projectile) -> Projectile:
    """Advance one step: move by velocity, then accelerate by gravity + wind."""
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + env.gravity + env.wind,
    )


def trajectory(env: Environment, projectile: Projectile,
               max_ticks: Optional[int] = None) -> Iterator[Projectile]:
    """
    Yield every in-flight state, starting with `projectile` itself.

    Stops once position.y <= 0 (landed). With max_ticks set, also stops
    after that many states and logs a warning, since parameters that never
    bring the projectile down would otherwise loop forever.
    """
    ticks = 0
    while projectile.in_flight():
        if max_ticks is not None and ticks >= max_ticks:
            logger.warning("Projectile still in flight after %d ticks at %r; stopping",
                           ticks, projectile.position)
            return
        yield projectile
        projectile = tick(env, projectile)
        ticks += 1
    logger.debug("Projectile landed after %d ticks at %r", ticks, projectile.position)


def canvas_coords(canvas: Canvas, position: Tuple):
    """Map a world point to (x, y) pixel coords; y is flipped so up is up."""
    return (round_half_away(position.x),
            canvas.height - round_half_away(position.y))


def plot_trajectory(canvas: Canvas, env: Environment, projectile: Projectile,
                    color: Color, max_ticks: Optional[int] = None) -> int:
    """
    Paint each in-flight position of the projectile onto the canvas.
    Positions off the canvas are dropped. Returns the number of ticks run.
    """
    logger.debug("Simulating projectile from %r with velocity %r",
                 projectile.position, projectile.velocity)
    count = 0
    for state in trajectory(env, projectile, max_ticks):
        pos = state.position
        if math.isfinite(pos.x) and math.isfinite(pos.y):
            x, y = canvas_coords(canvas, pos)
            canvas.write_pixel(x, y, color)
        count += 1
    return count
