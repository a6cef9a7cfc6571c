import argparse
import logging
import sys
from typing import Optional, Sequence

from .colour import FixedColour, rgba
from .config import SceneConfig
from .errors import ShapeError
from .scene import render

logger = logging.getLogger("rastershapes")


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rastershapes",
        description="Draw random points, lines, circles plus a rectangle and a triangle into a PNG",
    )
    parser.add_argument("--width", type=int, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, help="Canvas height in pixels")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible image")
    parser.add_argument("--points", type=int, help="Number of random points")
    parser.add_argument("--lines", type=int, help="Number of random lines")
    parser.add_argument("--circles", type=int, help="Number of random circles")
    parser.add_argument("-o", "--output", help="Where to save the image, format from the extension")
    parser.add_argument("--background", help="Background colour as r,g,b or r,g,b,a")
    parser.add_argument("--fixed-colour", help="Draw everything in one r,g,b colour instead of random colours")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        background = rgba.parse(args.background).as_tuple() if args.background else None
        colours = FixedColour(rgba.parse(args.fixed_colour)) if args.fixed_colour else None
    except ValueError as exc:
        logger.error("bad colour: %s", exc)
        return 1

    config = SceneConfig.from_env().with_overrides(
        width=args.width,
        height=args.height,
        seed=args.seed,
        points=args.points,
        lines=args.lines,
        circles=args.circles,
        output=args.output,
        background=background,
    )
    try:
        img = render(config, colours)
    except ShapeError as exc:
        logger.error("%s", exc)
        return 1

    try:
        img.save(config.output)
    except (ValueError, OSError) as exc:
        logger.error("could not save %s: %s", config.output, exc)
        return 1
    logger.info("Saved %s (%dx%d)", config.output, img.width, img.height)
    return 0


if __name__ == "__main__":
    sys.exit(main())
