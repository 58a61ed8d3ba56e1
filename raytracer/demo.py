#
# PROJECT: raytracer
# MODULE: raytracer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import logging
from dataclasses import replace

from .canvas import Canvas
from .color import parse_hex_color
from .config import SimulationConfig
from .logging_config import setup_logging
from .ppm import canvas_to_ppm
from .projectile import plot_trajectory

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Projectile demonstration: fires one projectile, plots its path on a
    canvas and writes the canvas to disk as PPM.
    """

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.canvas = None
        self.ticks = 0

    def render(self) -> str:
        """Run the simulation onto a fresh canvas and return the PPM text."""
        config = self.config
        self.canvas = Canvas(config.width, config.height)
        self.ticks = plot_trajectory(self.canvas, config.environment(),
                                     config.projectile(), config.color,
                                     max_ticks=config.max_ticks)
        return canvas_to_ppm(self.canvas)

    def run(self) -> int:
        ppm = self.render()
        path = self.config.output
        try:
            with open(path, 'w', encoding='ascii') as f:
                f.write(ppm)
        except OSError as e:
            logger.error("couldn't write to %s: %s", path, e)
            return 1
        logger.info("successfully wrote to %s (%d ticks)", path, self.ticks)
        return 0


def _triple(text):
    """argparse type for 'x,y,z'."""
    parts = text.split(',')
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected x,y,z, got {text!r}")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected numbers in {text!r}") from None


def _color(text):
    c = parse_hex_color(text)
    if c is None:
        raise argparse.ArgumentTypeError(f"expected #RRGGBB, got {text!r}")
    return c


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                     Default shot into /tmp/canvas.ppm
  %(prog)s -o shot.ppm --speed 9 --wind=-0.02,0,0     Slower shot into a headwind
  %(prog)s --width 400 --height 300 --color #00FF88   Smaller canvas, green trail
"""
    parser = argparse.ArgumentParser(
        description="Projectile trajectory rendered to a PPM image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-o", "--output",
                        help="Output PPM path (default: $RAYTRACER_OUTPUT or /tmp/canvas.ppm)")
    parser.add_argument("--width", type=int, help="Canvas width in pixels (default: 900)")
    parser.add_argument("--height", type=int, help="Canvas height in pixels (default: 550)")
    parser.add_argument("--speed", type=float, help="Launch speed (default: 11.25)")
    parser.add_argument("--direction", type=_triple, help="Launch direction x,y,z (default: 1,1.8,0)")
    parser.add_argument("--gravity", type=_triple, help="Gravity vector x,y,z (default: 0,-0.1,0)")
    parser.add_argument("--wind", type=_triple, help="Wind vector x,y,z (default: 0.01,0,0)")
    parser.add_argument("--color", type=_color, help="Trail color #RRGGBB (default: #FF0000)")
    parser.add_argument("--max-ticks", type=int, help="Simulation step cap (default: 10000)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser.parse_args(argv)


def build_config(args, environ=None) -> SimulationConfig:
    """Environment overrides first, then any flags given on the command line."""
    config = SimulationConfig.from_env(environ)
    overrides = {}
    for name in ('output', 'width', 'height', 'speed', 'direction',
                 'gravity', 'wind', 'color', 'max_ticks'):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    # replace() re-runs __post_init__, so overrides are validated too
    return replace(config, **overrides)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)
    except OSError as e:
        logger.error("couldn't open log file %s: %s", args.log_file, e)
        return 1
    try:
        config = build_config(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    return DemoApp(config).run()
