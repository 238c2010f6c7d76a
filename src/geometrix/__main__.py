"""
Command-line interface.

Usage::

    python -m geometrix bbox shapes.json
    python -m geometrix measure shapes.json
    python -m geometrix validate shapes.json

Each FILE is a JSON array of tagged shapes as written by
``geometrix.codec.save_file``.
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .bounds.bounding_box import BoundingBox2d, BoundingBox3d, hull_of
from .codec import encode, load_file, type_tag
from .config import DEFAULT_LOG_LEVEL
from .core import Point2d, Point3d
from .errors import DecodeError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _bounding_box(value):
    if isinstance(value, Point2d):
        return BoundingBox2d.singleton(value)
    if isinstance(value, Point3d):
        return BoundingBox3d.singleton(value)
    if isinstance(value, (BoundingBox2d, BoundingBox3d)):
        return value
    method = getattr(value, 'bounding_box', None)
    return method() if method is not None else None


def _measures(value) -> dict:
    result = {'type': type_tag(type(value))}
    for name in ('area', 'perimeter', 'length', 'circumference'):
        measure = getattr(value, name, None)
        if isinstance(measure, (int, float)):
            result[name] = measure
    return result


def cmd_bbox(shapes: list) -> int:
    boxes = [box for box in (_bounding_box(s) for s in shapes) if box is not None]
    if {type(b) for b in boxes} == {BoundingBox2d, BoundingBox3d}:
        logger.error("Cannot combine 2D and 3D shapes in one bounding box")
        return 1
    overall = hull_of(boxes)
    print(json.dumps(encode(overall) if overall is not None else None))
    return 0


def cmd_measure(shapes: list) -> int:
    print(json.dumps([_measures(s) for s in shapes], indent=2))
    return 0


def cmd_validate(shapes: list) -> int:
    print(f"OK: {len(shapes)} shapes")
    return 0


COMMANDS = {
    'bbox': cmd_bbox,
    'measure': cmd_measure,
    'validate': cmd_validate,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geometrix", description="Inspect JSON files of geometric shapes.")
    parser.add_argument("command", choices=sorted(COMMANDS), help="operation to run")
    parser.add_argument("file", help="JSON array of tagged shapes")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=None, help="optional file to write logs to")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        shapes = load_file(args.file)
    except DecodeError as e:
        logger.error(f"Invalid shape file '{args.file}': {e}")
        return 2
    except OSError as e:
        logger.error(f"Could not read '{args.file}': {e}")
        return 2

    return COMMANDS[args.command](shapes)


if __name__ == "__main__":
    sys.exit(main())
