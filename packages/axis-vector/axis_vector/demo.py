"""Walk a V3 through a few operations and print its components.

Also defines ScreenDimensions, a user-defined shape showing that a new
axis set gets all arithmetic without touching the engine.

Run: python -m axis_vector.demo [--screen 800 600]
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from axis_vector.axes import V3Axis
from axis_vector.engine import Vector, format_axes
from axis_vector.shapes import V3

logger = logging.getLogger(__name__)


class ScreenDimension(Enum):
    WIDTH = "width"
    HEIGHT = "height"


@dataclass
class ScreenDimensions(Vector[ScreenDimension], axes=ScreenDimension):
    width: float
    height: float

    def half_screen(self) -> ScreenDimensions:
        half = ScreenDimensions(self.width, self.height)
        half.multiply_scalar(0.5)
        return half


@dataclass(frozen=True)
class DemoConfig:
    """Settings for the demo walk.

    Attributes:
        start: Initial value of every axis.
        add: Scalar added to every axis.
        divide: Scalar every axis is then divided by.
        bump_z: Amount added to the z axis alone.
        screen: Optional (width, height) to halve.
    """

    start: float = 5.0
    add: float = 5.0
    divide: float = 4.0
    bump_z: float = 1.0
    screen: tuple[float, float] | None = None


def run(config: DemoConfig) -> V3:
    v = V3(config.start, config.start, config.start)
    v.add_scalar(config.add)
    logger.debug("after add_scalar(%s): %s", config.add, v)
    v.divide_scalar(config.divide)
    logger.debug("after divide_scalar(%s): %s", config.divide, v)
    v[V3Axis.Z] += config.bump_z
    return v


def parse_args(argv: Sequence[str] | None = None) -> tuple[DemoConfig, bool]:
    parser = argparse.ArgumentParser(description="axis-vector demo")
    parser.add_argument("--start", type=float, default=DemoConfig.start,
                        help="initial value of x, y and z (default: %(default)s)")
    parser.add_argument("--add", type=float, default=DemoConfig.add,
                        help="scalar added to every axis (default: %(default)s)")
    parser.add_argument("--divide", type=float, default=DemoConfig.divide,
                        help="scalar every axis is divided by (default: %(default)s)")
    parser.add_argument("--bump-z", type=float, default=DemoConfig.bump_z,
                        help="amount added to z afterwards (default: %(default)s)")
    parser.add_argument("--screen", type=float, nargs=2, metavar=("WIDTH", "HEIGHT"),
                        help="also print half of this screen size")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log each step")
    args = parser.parse_args(argv)
    config = DemoConfig(
        start=args.start,
        add=args.add,
        divide=args.divide,
        bump_z=args.bump_z,
        screen=tuple(args.screen) if args.screen else None,
    )
    return config, args.verbose


def main(argv: Sequence[str] | None = None) -> int:
    config, verbose = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    print(format_axes(run(config)))
    if config.screen is not None:
        print(format_axes(ScreenDimensions(*config.screen).half_screen()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
