# main.py
"""Render a scene file to an image.

Usage:
    pathtracer SCENE [--width W] [--height H] [--samples N] [--threads T]
               [--output PATH] [--seed S] [--compensate-roulette] [--verbose]

Example:
    pathtracer worlds/closed_room.json --width 200 --height 200 --samples 50
"""
import argparse
import logging
import sys
import time
from typing import List, Optional

from pathtracer.config import RenderSettings, setup_logging
from pathtracer.geometry.world import World
from pathtracer.renderer.image_output import save_image
from pathtracer.renderer.scene import Scene
from pathtracer.renderer.tile_renderer import TileRenderer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = RenderSettings()
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a JSON scene with a Monte-Carlo path tracer.",
    )
    parser.add_argument("scene", help="Path to the JSON scene file")
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Image width in pixels (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Image height in pixels (default: {defaults.height})")
    parser.add_argument("--samples", type=int, default=defaults.samples,
                        help=f"Samples per pixel (default: {defaults.samples})")
    parser.add_argument("--threads", type=int, default=defaults.threads,
                        help=f"Worker processes (default: {defaults.threads})")
    parser.add_argument("--output", "-o", default=defaults.output,
                        help=f"Output image path (default: {defaults.output})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Base random seed for reproducible renders")
    parser.add_argument("--compensate-roulette", action="store_true",
                        help="Reweight paths that survive Russian roulette")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def render(settings: RenderSettings, scene_path: str) -> None:
    """Load the scene, render it and write the image."""
    settings.validate()
    world = World.load(scene_path, settings.width, settings.height)
    scene = Scene.from_world(world, settings.roulette_compensation)
    image = TileRenderer(scene, world.camera, settings).render()
    save_image(image, settings.output)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO")

    settings = RenderSettings(
        width=args.width,
        height=args.height,
        samples=args.samples,
        threads=args.threads,
        output=args.output,
        seed=args.seed,
        roulette_compensation=args.compensate_roulette,
    )

    start = time.perf_counter()
    try:
        render(settings, args.scene)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("Total time taken: %.2f min(s)", (time.perf_counter() - start) / 60.0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
