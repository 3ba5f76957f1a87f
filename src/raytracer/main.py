# main.py
"""Render a sphere scene to an image file.

Usage:
    spheretrace [options]
    python -m raytracer.main [options]

Example:
    spheretrace --quality draft --scene three_spheres --seed 7 --output spheres.png --show
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from raytracer.config import DEFAULT_QUALITY, QUALITY_PRESETS, ConfigError, RenderSettings
from raytracer.renderer.image_io import ImageWriteError, save_image
from raytracer.renderer.raytracer import Renderer
from raytracer.scenes import SCENES, build_scene

logger = logging.getLogger("raytracer")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="spheretrace",
        description="Render a scene of spheres with a Monte Carlo ray tracer.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default=DEFAULT_QUALITY,
                        help="Preset for width, samples and bounce depth")
    parser.add_argument("--width", type=int, help="Image width in pixels (overrides --quality)")
    parser.add_argument("--samples", type=int, help="Samples per pixel (overrides --quality)")
    parser.add_argument("--depth", type=int, help="Maximum ray bounces (overrides --quality)")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random", help="Scene to render")
    parser.add_argument("--seed", type=int, help="Random seed; the same seed gives the same image")
    parser.add_argument("--output", "-o", default="image.ppm",
                        help="Output file; .ppm or any format Pillow can write")
    parser.add_argument("--show", action="store_true", help="Preview the result in a window")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False, quiet: bool = False):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings.from_quality(
        args.quality,
        image_width=args.width,
        samples_per_pixel=args.samples,
        max_depth=args.depth,
        scene=args.scene,
        seed=args.seed,
        output=args.output,
    ).validate()


def run(settings: RenderSettings, show: bool = False) -> str:
    """
    Build the scene and camera described by settings, render and save the image.

    Returns:
        The path of the written image
    """
    rng = random.Random(settings.seed)
    world = build_scene(settings.scene, rng)
    camera = settings.build_camera()
    logger.debug("Camera: %r", camera)

    renderer = Renderer(settings.image_width, settings.image_height,
                        settings.samples_per_pixel, settings.max_depth, rng=rng)
    pixels = renderer.render_image(world, camera)
    path = save_image(pixels, settings.output)

    if show:
        from raytracer.renderer.display import show_image
        show_image(pixels, scale=max(1, 800 // settings.image_width))
    return path


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    try:
        settings = settings_from_args(args)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        run(settings, show=args.show)
    except ImageWriteError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
