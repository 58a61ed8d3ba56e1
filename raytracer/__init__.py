#
# PROJECT: raytracer
# MODULE: raytracer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import EPSILON, approx_eq, Tuple, point, vector
from .color import Color, BLACK, WHITE, RED, parse_hex_color
from .canvas import Canvas
from .ppm import canvas_to_ppm
from .projectile import Projectile, Environment, tick, trajectory, plot_trajectory
from .config import SimulationConfig
from .logging_config import setup_logging
