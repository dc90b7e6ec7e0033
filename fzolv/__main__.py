"""Demo entrypoint: build a vector and print it."""

from __future__ import annotations

import argparse
import logging

from . import config
from .logging_config import setup_logging
from .math import Vector2f


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a greeting and a sample Vector2f.")
    parser.add_argument("--x", type=float, default=config.DEMO_X, help="x component of the sample point.")
    parser.add_argument("--y", type=float, default=config.DEMO_Y, help="y component of the sample point.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", type=str, default=None, help="Also write log records to this file.")
    return parser.parse_args(argv)


def format_point(point: Vector2f) -> str:
    return "{ %s : %f , %s : %f }" % ("X", point.x, "Y", point.y)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else config.DEFAULT_LOG_LEVEL, args.log_file)

    print(config.GREETING)
    print(config.BANNER)

    point = Vector2f()
    point.x = args.x
    point.y = args.y
    print(format_point(point))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
