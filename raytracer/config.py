#
# PROJECT: raytracer
# MODULE: raytracer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass, field
from typing import Tuple as Triple

from .color import Color, RED
from .math_utils import point, vector
from .projectile import Environment, Projectile


@dataclass
class SimulationConfig:
    """Parameters for one projectile demonstration run."""
    start: Triple[float, float, float] = (0.0, 1.0, 0.0)
    direction: Triple[float, float, float] = (1.0, 1.8, 0.0)
    speed: float = 11.25
    gravity: Triple[float, float, float] = (0.0, -0.1, 0.0)
    wind: Triple[float, float, float] = (0.01, 0.0, 0.0)
    width: int = 900
    height: int = 550
    color: Color = field(default_factory=lambda: RED)
    output: str = "/tmp/canvas.ppm"
    max_ticks: int = 10000

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError for settings the simulation cannot run with."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.max_ticks <= 0:
            raise ValueError(f"max_ticks must be positive, got {self.max_ticks}")
        for name in ('start', 'direction', 'gravity', 'wind'):
            if len(getattr(self, name)) != 3:
                raise ValueError(f"{name} needs 3 components")

    def environment(self) -> Environment:
        return Environment(gravity=vector(*self.gravity), wind=vector(*self.wind))

    def projectile(self) -> Projectile:
        """Launch state: start point, velocity = normalized direction * speed."""
        return Projectile(
            position=point(*self.start),
            velocity=vector(*self.direction).normalize() * self.speed,
        )

    @classmethod
    def from_env(cls, environ=None) -> 'SimulationConfig':
        """
        Default config with overrides from environment variables:
        RAYTRACER_OUTPUT, RAYTRACER_WIDTH, RAYTRACER_HEIGHT.
        """
        environ = os.environ if environ is None else environ
        kwargs = {}
        if environ.get('RAYTRACER_OUTPUT'):
            kwargs['output'] = environ['RAYTRACER_OUTPUT']
        for key, name in (('RAYTRACER_WIDTH', 'width'), ('RAYTRACER_HEIGHT', 'height')):
            raw = environ.get(key, '').strip()
            if raw:
                try:
                    kwargs[name] = int(raw)
                except ValueError:
                    raise ValueError(f"{key} must be an integer, got {raw!r}") from None
        return cls(**kwargs)
