"""Command-line entry point: render a scene file to an image."""

from __future__ import annotations

import argparse
import logging
import sys

from olio.parser import SceneParseError, parse_file
from olio.raytracer import RayTracer

logger = logging.getLogger(__name__)

_OUTPUT_GAMMA = 2.0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a raytra scene file.")
    parser.add_argument("-s", "--input_scene", required=True, help="Input scene file")
    parser.add_argument("-o", "--output", required=True, help="Output name")
    return parser


def main(argv=None) -> int:
    """Parse arguments, render the scene and write the image; return an exit code."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)

    try:
        parsed = parse_file(args.input_scene)
    except SceneParseError as exc:
        logger.error("%s", exc)
        logger.error("Failed to parse scene file.")
        return 1
    width, height = parsed.image_size
    if width <= 0 or height <= 0:
        logger.error("Failed to parse scene file.")
        return 1

    tracer = RayTracer(image_height=height)
    tracer.render(parsed.scene, parsed.lights, parsed.camera)
    try:
        tracer.write_image(args.output, _OUTPUT_GAMMA)
    except (ValueError, OSError) as exc:
        logger.error("could not write image: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())